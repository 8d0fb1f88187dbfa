"""Transport module for protecting substitution tables with RSA."""

from transport.keys import KeyPair, generate_key_pair, DEFAULT_KEY_SIZE
from transport.table_cipher import encrypt_table, decrypt_table

__all__ = [
    'KeyPair',
    'generate_key_pair',
    'DEFAULT_KEY_SIZE',
    'encrypt_table',
    'decrypt_table',
]
