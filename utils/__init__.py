"""Utility modules for logging and exception handling."""

from utils.logging import setup_logging, get_logger
from utils.exceptions import (
    ShadowCipherError,
    ConfigurationError,
    CodecError,
    InvalidTableError,
    TableGenerationError,
    MalformedTokenError,
    CryptoError,
    TableEncryptionError,
    TableDecryptionError,
    StorageError,
    FileReadError,
    FileWriteError,
)

__all__ = [
    'setup_logging',
    'get_logger',
    'ShadowCipherError',
    'ConfigurationError',
    'CodecError',
    'InvalidTableError',
    'TableGenerationError',
    'MalformedTokenError',
    'CryptoError',
    'TableEncryptionError',
    'TableDecryptionError',
    'StorageError',
    'FileReadError',
    'FileWriteError',
]
