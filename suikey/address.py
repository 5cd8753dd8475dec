import hashlib
import logging

from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from .constants import ED25519_FLAG, SUI_ADDRESS_LENGTH, KEY_SIZE
from .keys import KeyPair

logger = logging.getLogger(__name__)


def public_key_bytes(public_key: bytes | Ed25519PublicKey | KeyPair) -> bytes:
    """
    Raw 32-byte form of a public key.

    Raises:
        ValueError: If raw bytes are not 32 bytes long
    """
    if isinstance(public_key, KeyPair):
        return public_key.public_bytes
    if isinstance(public_key, Ed25519PublicKey):
        return public_key.public_bytes(encoding=Encoding.Raw, format=PublicFormat.Raw)
    if len(public_key) != KEY_SIZE:
        raise ValueError("public key must be 32 bytes")
    return bytes(public_key)


def public_key_to_address(public_key: bytes | Ed25519PublicKey | KeyPair) -> str:
    """
    Encode an Ed25519 public key as a Sui address.

    The address is BLAKE2b-256 over the scheme flag followed by the public
    key, hex encoded and prefixed with ``0x``. The digest is exactly 32 bytes
    so slicing to SUI_ADDRESS_LENGTH keeps all of it.

    Args:
        public_key: Raw public key bytes, Ed25519PublicKey or KeyPair

    Returns:
        Address string, ``0x`` followed by 64 lowercase hex characters
    """
    digest = hashlib.blake2b(ED25519_FLAG + public_key_bytes(public_key), digest_size=32)
    address = "0x" + digest.hexdigest()[:SUI_ADDRESS_LENGTH]
    logger.debug("Encoded address %s", address)
    return address
