"""Field-level checks: shape, embedded date and check digits."""

from .checksum import check_digits, checksum_ok, compute_check_digits
from .dates import DecodedDate, check_duf_year, decode, resolve_century
from .digits import DUF_LENGTH, NIN_LENGTH, normalize

__all__ = [
    "check_digits",
    "checksum_ok",
    "compute_check_digits",
    "DecodedDate",
    "check_duf_year",
    "decode",
    "resolve_century",
    "DUF_LENGTH",
    "NIN_LENGTH",
    "normalize",
]
