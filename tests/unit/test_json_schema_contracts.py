"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema контрактов:
- Валидность самих схем и их кэширование
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов
- Детекция нарушений constraints (min/max/pattern)
- Строки цифр с завершающим переводом строки
- Интеграция с Pydantic моделями
"""

import pytest

from src.core.contracts import (
    CHECKSUM_CONTRACTS,
    CHECKSUM_REQUEST,
    CHECKSUM_RESULT,
    ContractViolation,
    contract_errors,
    contract_validator,
    load_schema,
    validate_checksum_request,
    validate_checksum_result,
    validate_contract,
)
from src.core.domain import ChecksumRequest, ChecksumResult
from src.core.domain.digits import LuhnModNError

# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_checksum_request():
    """Валидный checksum_request для тестирования."""
    return {"base": 16, "number": "499602D2", "append": True}


@pytest.fixture
def valid_checksum_result():
    """Валидный checksum_result для тестирования."""
    return {
        "base": 10,
        "payload": "1234567890",
        "check_digit": "3",
        "number_with_checksum": "12345678903",
    }


# =============================================================================
# SCHEMA LOADING
# =============================================================================


class TestSchemaLoading:
    """Тесты загрузки схем"""

    @pytest.mark.parametrize("contract", CHECKSUM_CONTRACTS)
    def test_schemas_load(self, contract: str) -> None:
        schema = load_schema(contract)
        assert schema["type"] == "object"
        assert schema["additionalProperties"] is False

    def test_schema_cached(self) -> None:
        assert load_schema(CHECKSUM_REQUEST) is load_schema(CHECKSUM_REQUEST)
        assert contract_validator(CHECKSUM_RESULT) is contract_validator(CHECKSUM_RESULT)

    def test_missing_schema_raises(self) -> None:
        with pytest.raises(FileNotFoundError):
            load_schema("does_not_exist")


# =============================================================================
# CONTRACT VIOLATION
# =============================================================================


class TestContractViolation:
    """Ошибка нарушения контракта"""

    def test_is_luhn_mod_n_error(self) -> None:
        """Ловится вместе с остальными ошибками Luhn mod N"""
        with pytest.raises(LuhnModNError):
            validate_contract(CHECKSUM_REQUEST, {"base": 10})

    def test_carries_contract_and_errors(self) -> None:
        with pytest.raises(ContractViolation) as exc_info:
            validate_checksum_request({"base": 1, "number": "1"})

        violation = exc_info.value
        assert violation.contract == CHECKSUM_REQUEST
        assert violation.errors == ["$.base: 1 is less than the minimum of 2"]
        assert str(violation).startswith("checksum_request contract violated: ")

    def test_no_errors_for_valid_data(self, valid_checksum_request) -> None:
        assert contract_errors(CHECKSUM_REQUEST, valid_checksum_request) == []

    def test_errors_ordered_by_path(self) -> None:
        """Все нарушения сразу, упорядоченные по JSON path"""
        errors = contract_errors(CHECKSUM_REQUEST, {"number": "", "base": 0})

        assert len(errors) == 2
        assert errors[0].startswith("$.base: ")
        assert errors[1].startswith("$.number: ")


# =============================================================================
# CHECKSUM REQUEST
# =============================================================================


class TestChecksumRequestContract:
    """checksum_request.json"""

    def test_valid(self, valid_checksum_request) -> None:
        validate_checksum_request(valid_checksum_request)

    def test_append_optional(self, valid_checksum_request) -> None:
        del valid_checksum_request["append"]
        validate_checksum_request(valid_checksum_request)

    @pytest.mark.parametrize("field", ["base", "number"])
    def test_required_fields(self, valid_checksum_request, field: str) -> None:
        del valid_checksum_request[field]
        with pytest.raises(ContractViolation):
            validate_checksum_request(valid_checksum_request)

    @pytest.mark.parametrize("base", [1, 37])
    def test_base_range(self, valid_checksum_request, base: int) -> None:
        valid_checksum_request["base"] = base
        with pytest.raises(ContractViolation):
            validate_checksum_request(valid_checksum_request)

    def test_base_type(self, valid_checksum_request) -> None:
        valid_checksum_request["base"] = "16"
        assert contract_errors(CHECKSUM_REQUEST, valid_checksum_request)

    def test_number_pattern(self, valid_checksum_request) -> None:
        valid_checksum_request["number"] = "4996-02D2"
        with pytest.raises(ContractViolation):
            validate_checksum_request(valid_checksum_request)

    @pytest.mark.parametrize("number", ["12\n", "\n12", "1 2", "12\r\n"])
    def test_number_whitespace_rejected(self, valid_checksum_request, number: str) -> None:
        """Перевод строки в конце не проходит, как и в ChecksumRequest"""
        valid_checksum_request["number"] = number

        errors = contract_errors(CHECKSUM_REQUEST, valid_checksum_request)

        assert len(errors) == 1
        assert errors[0].startswith("$.number: ")

    def test_additional_properties(self, valid_checksum_request) -> None:
        valid_checksum_request["extra"] = 1
        with pytest.raises(ContractViolation):
            validate_checksum_request(valid_checksum_request)

    def test_pydantic_model_matches_schema(self) -> None:
        request = ChecksumRequest(base=16, number="499602D2", append=False)
        validate_checksum_request(request.model_dump())

    @pytest.mark.parametrize("number", ["12\n", "1a2b", "ZZ", "0"])
    def test_schema_agrees_with_pydantic_model(self, number: str) -> None:
        """Схема и модель принимают одни и те же строки (base 36)"""
        schema_ok = not contract_errors(CHECKSUM_REQUEST, {"base": 36, "number": number})

        try:
            ChecksumRequest(base=36, number=number)
            model_ok = True
        except ValueError:
            model_ok = False

        assert schema_ok is model_ok


# =============================================================================
# CHECKSUM RESULT
# =============================================================================


class TestChecksumResultContract:
    """checksum_result.json"""

    def test_valid(self, valid_checksum_result) -> None:
        validate_checksum_result(valid_checksum_result)

    def test_append_optional(self, valid_checksum_result) -> None:
        valid_checksum_result["append"] = False
        validate_checksum_result(valid_checksum_result)

    def test_check_digit_single_char(self, valid_checksum_result) -> None:
        valid_checksum_result["check_digit"] = "33"
        with pytest.raises(ContractViolation):
            validate_checksum_result(valid_checksum_result)

    def test_lowercase_only(self, valid_checksum_result) -> None:
        valid_checksum_result["payload"] = "ABC"
        assert contract_errors(CHECKSUM_RESULT, valid_checksum_result)

    @pytest.mark.parametrize("field", ["payload", "check_digit", "number_with_checksum"])
    def test_trailing_newline_rejected(self, valid_checksum_result, field: str) -> None:
        valid_checksum_result[field] = valid_checksum_result[field][:-1] + "\n"

        errors = contract_errors(CHECKSUM_RESULT, valid_checksum_result)

        assert any(error.startswith(f"$.{field}: ") for error in errors)

    def test_pydantic_model_matches_schema(self, valid_checksum_result) -> None:
        result = ChecksumResult(**valid_checksum_result)
        validate_checksum_result(result.model_dump())
