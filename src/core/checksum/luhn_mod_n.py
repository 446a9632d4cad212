"""
Luhn mod N — контрольная цифра для чисел в основаниях 2..36

Обобщённый алгоритм Luhn: одна контрольная цифра в том же основании,
что и число. Обнаруживает ошибки в одной цифре и большинство перестановок
соседних цифр.

Алгоритм (справа налево):
    factor = 2 для самой правой цифры, далее 1, 2, 1, ...
    addend = factor * value
    sum += addend // base + addend % base
    check_value = (base - sum % base) % base

Проверка выполняется тем же проходом по всему числу с контрольной цифрой,
но factor начинается с 1: число валидно, если sum % base == 0.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. has_valid_checksum(create_checksum(D, b), b) is True для любых валидных D, b
2. len(create_checksum(D, b)) == len(D) + 1
3. Основание и цифры проверяются на каждом входе, принимающем base
4. Engine не хранит состояния между вызовами (безопасен для потоков)
"""

import logging
from dataclasses import dataclass
from typing import Any

from src.core.domain.digits import (
    CHECKSUM_LENGTH,
    digit_char,
    luhn_weighted_sum,
    require_non_empty,
    validate_base,
    validate_digit_string,
)
from src.core.contracts import validate_checksum_request, validate_checksum_result
from src.core.domain.checksum import (
    ChecksumRequest,
    ChecksumResult,
    ChecksumVerification,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class LuhnModNConfig:
    """Конфигурация LuhnModN.

    Значения по умолчанию для вызовов, в которых base или append опущены.
    """

    default_base: int = 10
    append_by_default: bool = True


# =============================================================================
# ENGINE
# =============================================================================


class LuhnModN:
    """Создание и проверка контрольных сумм Luhn mod N.

    Операции:
    1. create_checksum — число с добавленной контрольной цифрой (или только цифра)
    2. has_valid_checksum — проверка числа с контрольной цифрой
    3. number_without_checksum — число без последней позиции
    4. extract_checksum — последняя позиция числа

    number_without_checksum и extract_checksum работают позиционно и не
    проверяют цифры: основание им не передаётся.
    """

    def __init__(self, config: LuhnModNConfig | None = None):
        self.config = config or LuhnModNConfig()
        validate_base(self.config.default_base)

    def create_checksum(
        self,
        number: str,
        base: int | None = None,
        return_complete_number: bool | None = None,
    ) -> str:
        """
        Вычисление контрольной цифры Luhn mod N.

        Args:
            number: Число в основании base (регистр не важен)
            base: Основание 2..36 (default: config.default_base)
            return_complete_number: Вернуть число вместе с контрольной цифрой
                (default: config.append_by_default)

        Returns:
            Нормализованное (lowercase) число с контрольной цифрой в конце,
            либо только контрольная цифра

        Raises:
            InvalidBaseError: Если base вне [2, 36]
            EmptyInputError: Если number пустое
            InvalidDigitError: Если number содержит невалидные для base цифры

        Examples:
            >>> LuhnModN().create_checksum("1234567890", 10)
            '12345678903'
            >>> LuhnModN().create_checksum("499602D2", 16, False)
            'f'
        """
        if base is None:
            base = self.config.default_base
        if return_complete_number is None:
            return_complete_number = self.config.append_by_default

        normalized = validate_digit_string(number, base)

        remainder = luhn_weighted_sum(normalized, base, initial_factor=2) % base
        check_digit = digit_char((base - remainder) % base, base)

        logger.debug("Luhn mod %d checksum for %s: %s", base, normalized, check_digit)

        return normalized + check_digit if return_complete_number else check_digit

    def has_valid_checksum(self, number: str, base: int | None = None) -> bool:
        """
        Проверка контрольной цифры Luhn mod N.

        Последний символ number считается контрольной цифрой.

        Args:
            number: Число с контрольной цифрой (регистр не важен)
            base: Основание 2..36 (default: config.default_base)

        Returns:
            True если контрольная цифра верна

        Raises:
            InvalidBaseError: Если base вне [2, 36]
            EmptyInputError: Если number пустое
            InvalidDigitError: Если number содержит невалидные для base цифры
        """
        if base is None:
            base = self.config.default_base

        normalized = validate_digit_string(number, base)

        # Контрольная цифра получает вес 1, поэтому проход начинается с 1
        valid = luhn_weighted_sum(normalized, base, initial_factor=1) % base == 0

        logger.debug("Luhn mod %d verification of %s: %s", base, normalized, valid)

        return valid

    def number_without_checksum(self, number: str) -> str:
        """
        Число без контрольной цифры (все позиции, кроме последней).

        Raises:
            EmptyInputError: Если number пустое
        """
        require_non_empty(number)
        return number[:-CHECKSUM_LENGTH]

    def extract_checksum(self, number: str) -> str:
        """
        Контрольная цифра числа (последняя позиция).

        Raises:
            EmptyInputError: Если number пустое
        """
        require_non_empty(number)
        return number[-CHECKSUM_LENGTH:]

    def process(self, request: ChecksumRequest) -> ChecksumResult:
        """
        Обработка провалидированного запроса на контрольную цифру.

        Args:
            request: ChecksumRequest (number, base, append)

        Returns:
            ChecksumResult с payload, контрольной цифрой и полным числом;
            result.render() учитывает request.append
        """
        complete = self.create_checksum(request.number, request.base, True)

        return ChecksumResult(
            payload=self.number_without_checksum(complete),
            base=request.base,
            check_digit=self.extract_checksum(complete),
            number_with_checksum=complete,
            append=request.append,
        )

    def process_payload(self, payload: dict[str, Any]) -> dict[str, Any]:
        """
        Обработка dict-запроса (например, разобранного JSON).

        Порядок проверок:
        1. Форма payload'а — контракт checksum_request
        2. Цифры относительно base — ChecksumRequest
        3. Форма ответа — контракт checksum_result

        Args:
            payload: {"number": ..., "base": ..., "append": ...}

        Returns:
            ChecksumResult.model_dump()

        Raises:
            ContractViolation: Если payload не соответствует checksum_request.json
            pydantic.ValidationError: Если цифры number невалидны для base
        """
        validate_checksum_request(payload)

        result = self.process(ChecksumRequest(**payload))

        data = result.model_dump()
        validate_checksum_result(data)
        return data

    def verify(self, number: str, base: int | None = None) -> ChecksumVerification:
        """Проверка числа с результатом в виде ChecksumVerification."""
        if base is None:
            base = self.config.default_base

        return ChecksumVerification(
            number=number.lower(),
            base=base,
            valid=self.has_valid_checksum(number, base),
        )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

# Engine без состояния: один экземпляр безопасно разделять
_DEFAULT_ENGINE = LuhnModN()


def create_checksum(
    number: str,
    base: int,
    return_complete_number: bool = True,
) -> str:
    """
    Вычисление контрольной цифры Luhn mod N.

    См. LuhnModN.create_checksum.
    """
    return _DEFAULT_ENGINE.create_checksum(number, base, return_complete_number)


def has_valid_checksum(number: str, base: int) -> bool:
    """
    Проверка контрольной цифры Luhn mod N.

    См. LuhnModN.has_valid_checksum.
    """
    return _DEFAULT_ENGINE.has_valid_checksum(number, base)


def number_without_checksum(number: str) -> str:
    """Число без контрольной цифры."""
    return _DEFAULT_ENGINE.number_without_checksum(number)


def extract_checksum(number: str) -> str:
    """Контрольная цифра числа."""
    return _DEFAULT_ENGINE.extract_checksum(number)
