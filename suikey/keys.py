import logging
import re
from typing import NamedTuple, Sequence

from mnemonic import Mnemonic
from cryptography.hazmat.primitives import hashes, hmac
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey, Ed25519PublicKey
from cryptography.hazmat.primitives.serialization import (
    Encoding, PrivateFormat, PublicFormat, NoEncryption
)

from .constants import MAC_SECRET_KEY, HARDENED_OFFSET, KEY_SIZE, BIP39_LANGUAGE
from .errors import DecodeError, MnemonicError

logger = logging.getLogger(__name__)

_PRIVATE_KEY_HEX_RE = re.compile(r"[0-9a-fA-F]{%d}" % (KEY_SIZE * 2))
_PATH_SEGMENT_RE = re.compile(r"(\d+)['hH]")


class ExtendedKey(NamedTuple):
    """Key material and chain code of one node in the derivation tree."""
    key: bytes
    chain_code: bytes


class KeyPair:
    """Ed25519 key pair. The public key is always computed from the private key."""

    def __init__(self, private_key: Ed25519PrivateKey):
        self._private_key = private_key
        self._public_key = private_key.public_key()

    @property
    def private_key(self) -> Ed25519PrivateKey:
        return self._private_key

    @property
    def public_key(self) -> Ed25519PublicKey:
        return self._public_key

    @property
    def private_bytes(self) -> bytes:
        return self._private_key.private_bytes(Encoding.Raw, PrivateFormat.Raw, NoEncryption())

    @property
    def public_bytes(self) -> bytes:
        return self._public_key.public_bytes(encoding=Encoding.Raw, format=PublicFormat.Raw)

    @property
    def private_key_hex(self) -> str:
        return self.private_bytes.hex()

    def __eq__(self, other):
        if not isinstance(other, KeyPair):
            return NotImplemented
        return self.private_bytes == other.private_bytes

    def __hash__(self):
        return hash(self.public_bytes)

    def __repr__(self):
        return f"KeyPair(public_key={self.public_bytes.hex()})"


def mnemonic_to_seed(mnemonic: str, passphrase: str = "") -> bytes:
    """
    Convert mnemonic to BIP39 seed.

    The word list checksum is not validated.

    Args:
        mnemonic: BIP39 mnemonic phrase
        passphrase: Optional BIP39 passphrase

    Returns:
        512-bit derived seed as bytes

    Raises:
        MnemonicError: If the phrase is not a string or is blank
    """
    if not isinstance(mnemonic, str) or not mnemonic.strip():
        raise MnemonicError("Mnemonic phrase is empty")
    mn = Mnemonic(BIP39_LANGUAGE)
    return mn.to_seed(mnemonic, passphrase=passphrase)


def stretch(data: bytes, secret: bytes) -> ExtendedKey:
    """
    HMAC-SHA512 over data keyed with secret, split into key and chain code.

    Args:
        data: HMAC message
        secret: HMAC key

    Returns:
        ExtendedKey made of the left and right 32 bytes of the digest
    """
    h = hmac.HMAC(secret, hashes.SHA512())
    h.update(data)
    result = h.finalize()
    return ExtendedKey(result[:KEY_SIZE], result[KEY_SIZE:])


def derive_master_key(seed: bytes) -> ExtendedKey:
    """
    Derive the master node from a raw seed.

    Args:
        seed: Seed of any length, usually the 64-byte BIP39 seed

    Returns:
        Master ExtendedKey
    """
    return stretch(seed, MAC_SECRET_KEY)


def derive_hardened_child(parent: ExtendedKey, index: int) -> ExtendedKey:
    """
    Derive the hardened child ``index'`` of parent.

    Args:
        parent: Parent node
        index: Unhardened child index, the hardened offset is added here

    Returns:
        Child ExtendedKey

    Raises:
        ValueError: If index is outside [0, 2**31)
    """
    if not 0 <= index < HARDENED_OFFSET:
        raise ValueError(f"Child index out of range: {index}")
    data = b"\x00" + parent.key + (HARDENED_OFFSET + index).to_bytes(4, "big")
    return stretch(data, parent.chain_code)


def walk_path(initial: ExtendedKey, path: Sequence[int]) -> ExtendedKey:
    """
    Apply hardened child derivation for every index in path, in order.

    An empty path returns initial unchanged.
    """
    node = initial
    for index in path:
        logger.debug("Deriving hardened child %d'", index)
        node = derive_hardened_child(node, index)
    return node


def parse_path(path: str) -> tuple[int, ...]:
    """
    Parse a textual derivation path such as ``m/44'/784'/0'/0'/0'``.

    Args:
        path: Path string, every segment must be hardened

    Returns:
        Tuple of unhardened indices

    Raises:
        ValueError: If the path is malformed or has a non-hardened segment
    """
    segments = path.strip().split("/")
    if segments[0] != "m":
        raise ValueError(f"Derivation path must start with 'm': {path!r}")

    indices = []
    for segment in segments[1:]:
        match = _PATH_SEGMENT_RE.fullmatch(segment)
        if not match:
            raise ValueError(f"Invalid or non-hardened path segment {segment!r} in {path!r}")
        index = int(match.group(1))
        if index >= HARDENED_OFFSET:
            raise ValueError(f"Child index out of range: {index}")
        indices.append(index)
    return tuple(indices)


def key_pair_from_seed(seed32: bytes) -> KeyPair:
    """
    Build an Ed25519 key pair from 32 bytes of key material.

    Args:
        seed32: 32-byte Ed25519 seed

    Returns:
        KeyPair instance

    Raises:
        ValueError: If seed is not exactly 32 bytes
    """
    if len(seed32) != KEY_SIZE:
        raise ValueError("seed32 must be 32 bytes")
    return KeyPair(Ed25519PrivateKey.from_private_bytes(seed32))


def key_pair_from_private_key_hex(private_key_hex: str) -> KeyPair:
    """
    Import an existing raw private key.

    Args:
        private_key_hex: 64 hex characters, optionally prefixed with ``0x``

    Returns:
        KeyPair instance

    Raises:
        DecodeError: If the string is not exactly 32 hex encoded bytes
    """
    hex_str = private_key_hex[2:] if private_key_hex.startswith("0x") else private_key_hex
    if not _PRIVATE_KEY_HEX_RE.fullmatch(hex_str):
        raise DecodeError(f"Private key must be {KEY_SIZE * 2} hex characters")
    return key_pair_from_seed(bytes.fromhex(hex_str))
