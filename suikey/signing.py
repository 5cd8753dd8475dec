import hashlib

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey, Ed25519PublicKey

from .address import public_key_bytes
from .keys import KeyPair


def blake2b256(data: bytes) -> bytes:
    return hashlib.blake2b(data, digest_size=32).digest()


def sign(private_key: Ed25519PrivateKey | KeyPair, message: bytes) -> bytes:
    """
    Sign the BLAKE2b-256 digest of message with Ed25519.

    The digest, not the message, is the payload handed to Ed25519.

    Args:
        private_key: Ed25519PrivateKey or KeyPair
        message: Bytes to sign

    Returns:
        64-byte signature
    """
    if isinstance(private_key, KeyPair):
        private_key = private_key.private_key
    return private_key.sign(blake2b256(message))


def verify(public_key: bytes | Ed25519PublicKey | KeyPair, message: bytes, signature: bytes) -> bool:
    """
    Check a signature produced by sign.

    Args:
        public_key: Raw public key bytes, Ed25519PublicKey or KeyPair
        message: Signed bytes
        signature: 64-byte signature

    Returns:
        True if the signature is valid, False otherwise
    """
    pubkey = Ed25519PublicKey.from_public_bytes(public_key_bytes(public_key))
    try:
        pubkey.verify(signature, blake2b256(message))
    except InvalidSignature:
        return False
    return True
