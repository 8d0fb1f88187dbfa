"""RSA key-pair provider."""

from dataclasses import dataclass

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from utils.logging import get_logger
from utils.exceptions import CryptoError

logger = get_logger(__name__)

DEFAULT_KEY_SIZE = 4096
DEFAULT_PUBLIC_EXPONENT = 65537


@dataclass(frozen=True)
class KeyPair:
    """RSA private key together with its public half."""
    
    private_key: rsa.RSAPrivateKey
    public_key: rsa.RSAPublicKey
    
    @property
    def key_size(self) -> int:
        return self.private_key.key_size
    
    def public_pem(self) -> str:
        """Public key as PEM-encoded SubjectPublicKeyInfo."""
        return self.public_key.public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        ).decode('ascii')
    
    def private_pem(self) -> str:
        """Private key as unencrypted PEM-encoded PKCS#8."""
        return self.private_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        ).decode('ascii')


def generate_key_pair(
    key_size: int = DEFAULT_KEY_SIZE,
    public_exponent: int = DEFAULT_PUBLIC_EXPONENT,
) -> KeyPair:
    """
    Generate a fresh RSA key pair.
    
    Args:
        key_size: Modulus size in bits
        public_exponent: RSA public exponent
        
    Returns:
        KeyPair holding both halves
        
    Raises:
        CryptoError: If the library rejects the parameters
    """
    logger.debug(f"Generating {key_size}-bit RSA key pair...")
    try:
        private_key = rsa.generate_private_key(
            public_exponent=public_exponent,
            key_size=key_size,
        )
    except ValueError as e:
        raise CryptoError(f"Failed to generate RSA key pair: {e}") from e
    return KeyPair(private_key=private_key, public_key=private_key.public_key())
