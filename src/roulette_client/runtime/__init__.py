"""Runtime helpers for the roulette client codec"""

from .address import PUBKEY_LENGTH, decode_address, encode_address, is_valid_address
from .errors import *
from .errors import __all__ as _error_names

__all__ = [
    "PUBKEY_LENGTH",
    "decode_address",
    "encode_address",
    "is_valid_address",
] + list(_error_names)
