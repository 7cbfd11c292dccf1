"""Per-call processing options."""

from pydantic import BaseModel, Field

import docrecon.common.utils.config as config_module


class ProcessingOptions(BaseModel):
    """Knobs for a single `process_document` call. Defaults come from `config.toml`."""

    batch_size: int = Field(default_factory=lambda: config_module.config.line_batch_size, gt=0)
    line_tolerance: float = Field(
        default_factory=lambda: config_module.config.same_line_tolerance, ge=0.0, le=1.0
    )
    structured_block_limit: int = Field(
        default_factory=lambda: config_module.config.structured_block_limit, ge=0
    )
