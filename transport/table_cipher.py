"""RSA-OAEP encryption of substitution tables for transmission."""

import base64

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from codec.table import SubstitutionTable
from utils.logging import get_logger
from utils.exceptions import (
    InvalidTableError,
    TableEncryptionError,
    TableDecryptionError,
)

logger = get_logger(__name__)


def _oaep() -> padding.OAEP:
    return padding.OAEP(
        mgf=padding.MGF1(algorithm=hashes.SHA256()),
        algorithm=hashes.SHA256(),
        label=None,
    )


def encrypt_table(table: SubstitutionTable, public_key: rsa.RSAPublicKey) -> str:
    """
    Encrypt a substitution table with an RSA public key.
    
    The table's JSON form is encrypted with OAEP and returned as base64.
    
    Args:
        table: Table to protect
        public_key: Recipient's public key
        
    Returns:
        Base64 ciphertext
        
    Raises:
        TableEncryptionError: If the payload is too large for the key or
                              encryption otherwise fails
    """
    payload = table.to_json().encode('utf-8')
    try:
        ciphertext = public_key.encrypt(payload, _oaep())
    except ValueError as e:
        raise TableEncryptionError(
            f"Failed to encrypt substitution table "
            f"({len(payload)} bytes, {public_key.key_size}-bit key): {e}"
        ) from e
    return base64.b64encode(ciphertext).decode('ascii')


def decrypt_table(ciphertext: str, private_key: rsa.RSAPrivateKey) -> SubstitutionTable:
    """
    Decrypt a substitution table produced by encrypt_table().
    
    Args:
        ciphertext: Base64 ciphertext
        private_key: Private key matching the encrypting public key
        
    Returns:
        Recovered SubstitutionTable
        
    Raises:
        TableDecryptionError: On malformed base64, a mismatched key,
                              corrupt ciphertext or an invalid table payload
    """
    try:
        raw = base64.b64decode(ciphertext, validate=True)
    # binascii.Error for bad padding or alphabet, plain ValueError for non-ASCII text
    except ValueError as e:
        raise TableDecryptionError(f"Encrypted table is not valid base64: {e}") from e
    
    try:
        payload = private_key.decrypt(raw, _oaep())
    except ValueError as e:
        raise TableDecryptionError(f"Failed to decrypt substitution table: {e}") from e
    
    try:
        return SubstitutionTable.from_json(payload.decode('utf-8'))
    except (UnicodeDecodeError, InvalidTableError) as e:
        raise TableDecryptionError(f"Decrypted payload is not a valid table: {e}") from e
