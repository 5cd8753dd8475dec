# HMAC key for the master node (SLIP-0010 ed25519 curve)
MAC_SECRET_KEY = b"ed25519 seed"

# Hardened derivation only
HARDENED_OFFSET = 0x80000000

# m/44'/784'/0'/0'/0', 784 is the registered Sui coin type
DEFAULT_PATH = (44, 784, 0, 0, 0)

# Signature scheme flag prefixed to the public key before hashing
ED25519_FLAG = b"\x00"

# Hex characters kept from the BLAKE2b-256 digest (all 32 bytes)
SUI_ADDRESS_LENGTH = 64

KEY_SIZE = 32

BIP39_LANGUAGE = "english"
