"""
Checksum modules

Luhn mod N для чисел в основаниях 2..36 и алфавит цифр 0-9a-z.
"""

# Digits
from src.core.domain.digits import (
    # Constants
    CHECKSUM_LENGTH,
    DIGIT_ALPHABET,
    MAX_BASE,
    MIN_BASE,
    # Exceptions
    EmptyInputError,
    InvalidBaseError,
    InvalidDigitError,
    LuhnModNError,
    # Functions
    digit_char,
    digit_value,
    require_non_empty,
    validate_base,
    validate_digit_string,
    luhn_weighted_sum,
)

# Luhn mod N
from src.core.checksum.luhn_mod_n import (
    LuhnModN,
    LuhnModNConfig,
    create_checksum,
    extract_checksum,
    has_valid_checksum,
    number_without_checksum,
)

__all__ = [
    # Digits — Constants
    "CHECKSUM_LENGTH",
    "DIGIT_ALPHABET",
    "MAX_BASE",
    "MIN_BASE",
    # Digits — Exceptions
    "EmptyInputError",
    "InvalidBaseError",
    "InvalidDigitError",
    "LuhnModNError",
    # Digits — Functions
    "digit_char",
    "digit_value",
    "require_non_empty",
    "validate_base",
    "validate_digit_string",
    "luhn_weighted_sum",
    # Luhn mod N — Types
    "LuhnModN",
    "LuhnModNConfig",
    # Luhn mod N — Functions
    "create_checksum",
    "extract_checksum",
    "has_valid_checksum",
    "number_without_checksum",
]
