import logging
from typing import Sequence

from .address import public_key_to_address
from .constants import DEFAULT_PATH
from .keys import (
    KeyPair,
    mnemonic_to_seed,
    derive_master_key,
    walk_path,
    parse_path,
    key_pair_from_seed,
    key_pair_from_private_key_hex
)
from . import signing

logger = logging.getLogger(__name__)


def get_key_pair(mnemonic: str, path: Sequence[int] | str = DEFAULT_PATH, passphrase: str = "") -> KeyPair:
    """
    Derive the Ed25519 key pair for a mnemonic along a hardened path.

    Args:
        mnemonic: BIP39 mnemonic phrase
        path: Sequence of unhardened indices or a path string like ``m/44'/784'/0'/0'/0'``
        passphrase: Optional BIP39 passphrase

    Returns:
        KeyPair instance

    Raises:
        MnemonicError: If the phrase is blank
        ValueError: If the path is malformed or an index is out of range
    """
    if isinstance(path, str):
        path = parse_path(path)
    logger.debug("Deriving key pair along path of %d segments", len(path))

    seed = mnemonic_to_seed(mnemonic, passphrase=passphrase)
    node = walk_path(derive_master_key(seed), path)
    return key_pair_from_seed(node.key)


def get_key_pair_by_private_key(private_key_hex: str) -> KeyPair:
    """
    Import a key pair from a hex encoded private key.

    Args:
        private_key_hex: 64 hex characters, optionally prefixed with ``0x``

    Returns:
        KeyPair instance

    Raises:
        DecodeError: If the hex string is malformed
    """
    return key_pair_from_private_key_hex(private_key_hex)


def get_sui_address(source: str | KeyPair, path: Sequence[int] | str = DEFAULT_PATH) -> str:
    """
    Sui address of a key pair, or of the key pair derived from a mnemonic.

    Args:
        source: Mnemonic phrase or KeyPair
        path: Derivation path, ignored when source is a KeyPair

    Returns:
        Address string
    """
    if isinstance(source, KeyPair):
        return public_key_to_address(source)
    return public_key_to_address(get_key_pair(source, path))


def sign(key_pair: KeyPair, data: bytes) -> bytes:
    """Sign data (over its BLAKE2b-256 digest) with key_pair."""
    return signing.sign(key_pair, data)


def verify(public_key, data: bytes, signature: bytes) -> bool:
    return signing.verify(public_key, data, signature)
