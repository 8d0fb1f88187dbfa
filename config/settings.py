"""Configuration management for the shadow cipher."""

from dataclasses import dataclass
from typing import Optional
import os
from pathlib import Path

from dotenv import load_dotenv

from utils.exceptions import ConfigurationError


# Load .env file from project root
# This is called at module import time to ensure env vars are available
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(dotenv_path=env_path, override=False)

CODEC_FORMATS = ('delimited', 'tagged')

# OAEP-SHA256 on a 2048-bit key holds 190 bytes; the longest table JSON is 184
MIN_KEY_SIZE = 2048

_TRUE_VALUES = ('1', 'true', 'yes', 'on')
_FALSE_VALUES = ('0', 'false', 'no', 'off')


@dataclass
class CipherConfig:
    """Configuration for the encrypt/decrypt pipeline."""
    
    input_path: str = "./shadow/message.txt"
    encrypted_path: str = "./shadow/encrypted_message.txt"
    decrypted_path: str = "./shadow/decrypted_message.txt"
    key_size: int = 4096
    codec_format: str = "delimited"
    decode_strict: bool = False
    
    def validate(self) -> None:
        """Validate pipeline configuration parameters."""
        if not self.input_path:
            raise ValueError("Input path is required")
        if not self.encrypted_path:
            raise ValueError("Encrypted message path is required")
        if not self.decrypted_path:
            raise ValueError("Decrypted message path is required")
        if not isinstance(self.key_size, int) or self.key_size < MIN_KEY_SIZE:
            raise ValueError(f"RSA key size must be at least {MIN_KEY_SIZE} bits")
        if self.key_size % 256:
            raise ValueError("RSA key size must be a multiple of 256")
        if self.codec_format not in CODEC_FORMATS:
            raise ValueError(
                f"Codec format must be one of {', '.join(CODEC_FORMATS)}, "
                f"got: {self.codec_format}"
            )


def _parse_bool(name: str, value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean (true/false), got: {value}")


class Config:
    """Main configuration loader and manager."""
    
    def __init__(self):
        """Initialize configuration manager."""
        self.cipher: Optional[CipherConfig] = None
    
    def load_cipher_config(self) -> CipherConfig:
        """
        Load pipeline configuration from environment variables.
        
        Environment variables:
            SHADOW_INPUT_PATH: Message to encrypt (default: ./shadow/message.txt)
            SHADOW_ENCRYPTED_PATH: Encoded output (default: ./shadow/encrypted_message.txt)
            SHADOW_DECRYPTED_PATH: Decoded output (default: ./shadow/decrypted_message.txt)
            RSA_KEY_SIZE: RSA modulus size in bits (default: 4096)
            CODEC_FORMAT: delimited or tagged (default: delimited)
            DECODE_STRICT: Reject unmapped numeric tokens (default: false)
        
        Returns:
            Validated CipherConfig instance
            
        Raises:
            ConfigurationError: If a variable cannot be parsed
            ValueError: If configuration is invalid
        """
        key_size_str = os.getenv('RSA_KEY_SIZE', '4096')
        try:
            key_size = int(key_size_str)
        except ValueError:
            raise ConfigurationError(f"RSA_KEY_SIZE must be a valid integer, got: {key_size_str}")
        
        config = CipherConfig(
            input_path=os.getenv('SHADOW_INPUT_PATH', './shadow/message.txt'),
            encrypted_path=os.getenv('SHADOW_ENCRYPTED_PATH', './shadow/encrypted_message.txt'),
            decrypted_path=os.getenv('SHADOW_DECRYPTED_PATH', './shadow/decrypted_message.txt'),
            key_size=key_size,
            codec_format=os.getenv('CODEC_FORMAT', 'delimited').strip().lower(),
            decode_strict=_parse_bool('DECODE_STRICT', os.getenv('DECODE_STRICT', 'false')),
        )
        config.validate()
        self.cipher = config
        return config
