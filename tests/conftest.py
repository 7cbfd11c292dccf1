"""
Pytest configuration and global fixtures.
"""
import random
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import docrecon.common.utils.config as config_module
from docrecon.common.models import ProcessingOptions


@pytest.fixture
def rng():
    """Seeded RNG so shuffles are reproducible."""
    return random.Random(1234)


@pytest.fixture
def options():
    """Default processing options, independent of any local config edits."""
    return ProcessingOptions(batch_size=1000, line_tolerance=0.01, structured_block_limit=10000)


@pytest.fixture
def patch_config(monkeypatch):
    """Replace fields of the loaded config for one test."""

    def _patch(**changes):
        monkeypatch.setattr(config_module, "config", config_module.config.model_copy(update=changes))
        return config_module.config

    return _patch
