"""
Contract Validation Module

JSON Schema контракты dict-запросов и результатов Luhn mod N.
"""

from .validators import (
    CHECKSUM_CONTRACTS,
    CHECKSUM_REQUEST,
    CHECKSUM_RESULT,
    SCHEMA_DIR,
    ContractViolation,
    contract_errors,
    contract_validator,
    load_schema,
    validate_checksum_request,
    validate_checksum_result,
    validate_contract,
)

__all__ = [
    # Constants
    "CHECKSUM_CONTRACTS",
    "CHECKSUM_REQUEST",
    "CHECKSUM_RESULT",
    "SCHEMA_DIR",
    # Exceptions
    "ContractViolation",
    # Functions
    "contract_errors",
    "contract_validator",
    "load_schema",
    "validate_checksum_request",
    "validate_checksum_result",
    "validate_contract",
]
