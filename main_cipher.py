#!/usr/bin/env python3
"""
Main entry point for the shadow cipher pipeline.

Reads a message, protects a freshly generated substitution table with RSA,
then encodes and decodes the message with the recovered table and writes
both results to disk. Configuration is loaded from environment variables.
"""

from dataclasses import dataclass
from typing import Optional
import asyncio
import random
import sys
import os

from config.settings import Config, CipherConfig
from codec.table import SubstitutionTable, generate_substitution_table
from codec.encoding import encode_message, decode_message
from codec.tokens import encode_tagged, decode_tagged
from transport.keys import KeyPair, generate_key_pair
from transport.table_cipher import encrypt_table, decrypt_table
from storage.files import read_message_from_file, write_message_to_file
from utils.logging import setup_logging, get_logger
from utils.exceptions import (
    ShadowCipherError,
    ConfigurationError,
    TableDecryptionError,
)

logger = get_logger(__name__)


@dataclass
class PipelineResult:
    """Intermediate values produced by one pipeline run."""
    
    message: str
    table: SubstitutionTable
    encrypted_table: str
    encoded_message: str
    decoded_message: str


class ShadowCipherApplication:
    """Main application class for the cipher pipeline."""
    
    def __init__(
        self,
        config: Optional[Config] = None,
        key_pair: Optional[KeyPair] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize application.
        
        Args:
            config: Configuration manager (a fresh Config by default)
            key_pair: RSA key pair to use instead of generating one
            rng: Random source for table generation
        """
        self.config = config or Config()
        self.key_pair = key_pair
        self.rng = rng
    
    async def run(self) -> PipelineResult:
        """
        Run the pipeline once, strictly in sequence.
        
        Returns:
            PipelineResult with every intermediate value
            
        Raises:
            ShadowCipherError: If any stage fails; later outputs are not written
            ValueError: If configuration validation fails
        """
        if self.config.cipher is None:
            logger.info("Loading configuration...")
            self.config.load_cipher_config()
        cipher_config = self.config.cipher
        logger.info(
            f"Configuration loaded: "
            f"input={cipher_config.input_path}, "
            f"format={cipher_config.codec_format}, "
            f"key_size={cipher_config.key_size}"
        )
        
        message = await read_message_from_file(cipher_config.input_path)
        logger.info(f"Original message read from file: {message!r}")
        
        table = generate_substitution_table(self.rng)
        logger.info(f"Substitution table generated: {table.to_dict()}")
        
        key_pair = await self._get_key_pair(cipher_config)
        
        encrypted_table = encrypt_table(table, key_pair.public_key)
        logger.info(f"Substitution table encrypted: {encrypted_table}")
        
        decrypted_table = decrypt_table(encrypted_table, key_pair.private_key)
        logger.info(f"Substitution table decrypted: {decrypted_table.to_dict()}")
        if decrypted_table != table:
            raise TableDecryptionError("Decrypted substitution table does not match the original")
        
        encoded_message = self._encode(message, decrypted_table, cipher_config)
        logger.info(f"Encrypted message: {encoded_message!r}")
        await write_message_to_file(cipher_config.encrypted_path, encoded_message)
        
        decoded_message = self._decode(encoded_message, decrypted_table, cipher_config)
        logger.info(f"Decrypted message: {decoded_message!r}")
        await write_message_to_file(cipher_config.decrypted_path, decoded_message)
        
        return PipelineResult(
            message=message,
            table=decrypted_table,
            encrypted_table=encrypted_table,
            encoded_message=encoded_message,
            decoded_message=decoded_message,
        )
    
    async def _get_key_pair(self, cipher_config: CipherConfig) -> KeyPair:
        if self.key_pair is None:
            logger.info(f"Generating {cipher_config.key_size}-bit RSA key pair...")
            self.key_pair = await asyncio.to_thread(generate_key_pair, cipher_config.key_size)
        return self.key_pair
    
    @staticmethod
    def _encode(message: str, table: SubstitutionTable, cipher_config: CipherConfig) -> str:
        if cipher_config.codec_format == 'tagged':
            return encode_tagged(message, table)
        return encode_message(message, table)
    
    @staticmethod
    def _decode(encoded: str, table: SubstitutionTable, cipher_config: CipherConfig) -> str:
        if cipher_config.codec_format == 'tagged':
            return decode_tagged(encoded, table)
        return decode_message(encoded, table, strict=cipher_config.decode_strict)


async def main() -> int:
    """Main entry point; returns the process exit status."""
    # Get log level from environment
    log_level = os.getenv('LOG_LEVEL', 'INFO')
    
    # Setup logging
    setup_logging(log_level)
    
    logger.info("Starting shadow cipher...")
    
    app = ShadowCipherApplication()
    try:
        logger.info("Loading configuration...")
        app.config.load_cipher_config()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        logger.error(
            "Please check your environment variables. "
            "See .env.example for required configuration."
        )
        return 1
    except ValueError as e:
        logger.error(f"Configuration validation error: {e}")
        return 1
    
    try:
        await app.run()
    except ShadowCipherError as e:
        logger.error(f"Error: {e}")
        return 1
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return 1
    
    logger.info("Shadow cipher finished successfully")
    return 0


def cli() -> None:
    """Console script wrapper around main()."""
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        print("\nInterrupted")
        sys.exit(1)


if __name__ == '__main__':
    cli()
