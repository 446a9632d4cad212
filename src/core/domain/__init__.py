"""
Domain models and value objects.

Contains the digit alphabet, base validation and the request/result models
for Luhn mod N checksums.
"""

from src.core.domain.checksum import (
    ChecksumRequest,
    ChecksumResult,
    ChecksumVerification,
)
from src.core.domain.digits import (
    CHECKSUM_LENGTH,
    DIGIT_ALPHABET,
    MAX_BASE,
    MIN_BASE,
    EmptyInputError,
    InvalidBaseError,
    InvalidDigitError,
    LuhnModNError,
    digit_char,
    digit_value,
    require_non_empty,
    validate_base,
    validate_digit_string,
    luhn_weighted_sum,
)

__all__ = [
    # Digits module
    "CHECKSUM_LENGTH",
    "DIGIT_ALPHABET",
    "MAX_BASE",
    "MIN_BASE",
    "LuhnModNError",
    "InvalidBaseError",
    "InvalidDigitError",
    "EmptyInputError",
    "digit_char",
    "digit_value",
    "require_non_empty",
    "validate_base",
    "validate_digit_string",
    "luhn_weighted_sum",
    # Checksum models
    "ChecksumRequest",
    "ChecksumResult",
    "ChecksumVerification",
]
