"""Configuration module for managing pipeline settings."""

from config.settings import (
    CipherConfig,
    Config,
    CODEC_FORMATS,
    MIN_KEY_SIZE,
)

__all__ = [
    'CipherConfig',
    'Config',
    'CODEC_FORMATS',
    'MIN_KEY_SIZE',
]
