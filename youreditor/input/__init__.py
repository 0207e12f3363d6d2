"""Input-layer public API: key values and the raw byte decoder."""

from .keys import ARROW_KEYS, Key, ctrl_key, key_name
from .reader import READ_TIMEOUT_MS, read_key

__all__ = [
    "ARROW_KEYS",
    "Key",
    "READ_TIMEOUT_MS",
    "ctrl_key",
    "key_name",
    "read_key",
]
