"""Custom exception classes for the shadow cipher."""


class ShadowCipherError(Exception):
    """Base exception class for all shadow cipher errors."""
    pass


class ConfigurationError(ShadowCipherError):
    """Exception raised when configuration is invalid or missing."""
    pass


class CodecError(ShadowCipherError):
    """Base exception for substitution codec failures."""
    pass


class InvalidTableError(CodecError):
    """Exception raised when a substitution table breaks its invariants."""
    pass


class TableGenerationError(CodecError):
    """Exception raised when no unused number could be drawn for a letter."""
    pass


class MalformedTokenError(CodecError):
    """Exception raised when an encoded token cannot be decoded."""
    pass


class CryptoError(ShadowCipherError):
    """Base exception for asymmetric encryption failures."""
    pass


class TableEncryptionError(CryptoError):
    """Exception raised when encrypting the substitution table fails."""
    pass


class TableDecryptionError(CryptoError):
    """Exception raised when decrypting the substitution table fails."""
    pass


class StorageError(ShadowCipherError):
    """Base exception for file read and write failures."""
    pass


class FileReadError(StorageError):
    """Exception raised when reading a message file fails."""
    pass


class FileWriteError(StorageError):
    """Exception raised when writing a message file fails."""
    pass
