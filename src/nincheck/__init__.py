"""nincheck — classify and validate Norwegian identity numbers."""

__version__ = "0.1.0"

from .config import NinCheckConfig, Policy, load_config
from .engine import Category, Classification, Classifier, Outcome
from .identifier import Identifier
from .text import exists, is_numeric, to_int
from .validation import (
    birthdate,
    check_nin,
    classify,
    classify_nin,
    has_birthdate,
    is_valid_birth_number,
    is_valid_d_number,
    is_valid_duf_number,
    is_valid_f_number,
    is_valid_fh_number,
    is_valid_h_number,
    is_valid_nin,
    is_valid_syntpop_test_number,
    is_valid_tenor_test_number,
    last_failed_step,
)

__all__ = [
    "__version__",
    "NinCheckConfig",
    "Policy",
    "load_config",
    "Category",
    "Classification",
    "Classifier",
    "Outcome",
    "Identifier",
    "exists",
    "is_numeric",
    "to_int",
    "birthdate",
    "check_nin",
    "classify",
    "classify_nin",
    "has_birthdate",
    "is_valid_birth_number",
    "is_valid_d_number",
    "is_valid_duf_number",
    "is_valid_f_number",
    "is_valid_fh_number",
    "is_valid_h_number",
    "is_valid_nin",
    "is_valid_syntpop_test_number",
    "is_valid_tenor_test_number",
    "last_failed_step",
]
