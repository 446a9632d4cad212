"""
Checksum Contracts — JSON Schema контракты payload'ов Luhn mod N

Контракты описывают dict-представления запроса и результата, которыми
LuhnModN.process_payload обменивается с вызывающим кодом:
- checksum_request.json (вход: number, base, append)
- checksum_result.json (выход: payload, base, check_digit, number_with_checksum, append)

JSON Schema проверяет только форму payload'а. Соответствие цифр основанию и
верность контрольной цифры проверяют pydantic модели из src.core.domain.checksum.

Строки цифр в схемах ограничены через "not": {"pattern": "[^...]"}: jsonschema
исполняет pattern через re.search, где "$" совпадает и перед завершающим "\\n".
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Final

from jsonschema import Draft202012Validator

from src.core.domain.digits import LuhnModNError

# =============================================================================
# КОНТРАКТЫ
# =============================================================================

# contracts/schema/ в корне репозитория
SCHEMA_DIR: Final[Path] = Path(__file__).resolve().parents[3] / "contracts" / "schema"

CHECKSUM_REQUEST: Final[str] = "checksum_request"
CHECKSUM_RESULT: Final[str] = "checksum_result"

CHECKSUM_CONTRACTS: Final[tuple[str, ...]] = (CHECKSUM_REQUEST, CHECKSUM_RESULT)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ContractViolation(LuhnModNError):
    """
    Payload не соответствует JSON Schema контракта.

    errors содержит все нарушения в виде "<json path>: <сообщение>",
    а не только первое найденное.
    """

    def __init__(self, contract: str, errors: list[str]):
        self.contract = contract
        self.errors = errors
        super().__init__(f"{contract} contract violated: " + "; ".join(errors))


# =============================================================================
# ЗАГРУЗКА СХЕМ
# =============================================================================


@lru_cache(maxsize=None)
def load_schema(contract: str) -> dict[str, Any]:
    """
    Загрузка и meta-валидация схемы контракта.

    Args:
        contract: Имя контракта без расширения (например, 'checksum_request')

    Returns:
        Схема как dict (кэшируется)

    Raises:
        FileNotFoundError: Если файла схемы нет в SCHEMA_DIR
        jsonschema.SchemaError: Если файл не является валидной Draft 2020-12 схемой
    """
    schema_path = SCHEMA_DIR / f"{contract}.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    Draft202012Validator.check_schema(schema)
    return schema


@lru_cache(maxsize=None)
def contract_validator(contract: str) -> Draft202012Validator:
    """Validator контракта (кэшируется, безопасен для повторного использования)."""
    return Draft202012Validator(load_schema(contract))


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def contract_errors(contract: str, data: Any) -> list[str]:
    """
    Все нарушения контракта в виде строк, упорядоченных по JSON path.

    Returns:
        Пустой список, если data соответствует контракту

    Examples:
        >>> contract_errors("checksum_request", {"base": 37, "number": "1"})
        ['$.base: 37 is greater than the maximum of 36']
    """
    violations = sorted(
        contract_validator(contract).iter_errors(data),
        key=lambda error: [str(part) for part in error.absolute_path],
    )
    return [f"{error.json_path}: {error.message}" for error in violations]


def validate_contract(contract: str, data: Any) -> None:
    """
    Валидация payload'а против контракта.

    Raises:
        ContractViolation: Если есть хотя бы одно нарушение
    """
    errors = contract_errors(contract, data)
    if errors:
        raise ContractViolation(contract, errors)


def validate_checksum_request(data: Any) -> None:
    """
    Валидация dict-запроса на контрольную цифру.

    Raises:
        ContractViolation: Если данные не соответствуют checksum_request.json
    """
    validate_contract(CHECKSUM_REQUEST, data)


def validate_checksum_result(data: Any) -> None:
    """
    Валидация dict-результата контрольной цифры.

    Raises:
        ContractViolation: Если данные не соответствуют checksum_result.json
    """
    validate_contract(CHECKSUM_RESULT, data)
