"""Configuration, logging and statistics helpers."""
