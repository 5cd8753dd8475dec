class SuiKeyError(ValueError):
    """Base class for key derivation errors."""


class DecodeError(SuiKeyError):
    """Raised when a hex encoded private key is malformed."""


class MnemonicError(SuiKeyError):
    """Raised when a mnemonic phrase cannot be turned into a seed."""
