"""
Checksum — модели запроса и результата Luhn mod N

Схемы: contracts/schema/checksum_request.json,
       contracts/schema/checksum_result.json

Immutable Pydantic модели для передачи чисел с контрольной цифрой между
слоями системы. model_dump() запроса и результата соответствует своей JSON Schema.
"""

from pydantic import BaseModel, Field, field_validator

from src.core.domain.digits import (
    MAX_BASE,
    MIN_BASE,
    digit_value,
    luhn_weighted_sum,
    validate_digit_string,
)

# Паттерны строк цифр (pydantic, Rust regex)
DIGITS_PATTERN = r"^[0-9A-Za-z]+$"
NORMALIZED_DIGITS_PATTERN = r"^[0-9a-z]+$"


# =============================================================================
# REQUEST
# =============================================================================


class ChecksumRequest(BaseModel):
    """
    Запрос на вычисление контрольной цифры.

    number нормализуется в нижний регистр и проверяется на соответствие base.
    """

    base: int = Field(..., ge=MIN_BASE, le=MAX_BASE, description="Основание (2..36)")
    number: str = Field(
        ..., min_length=1, pattern=DIGITS_PATTERN, description="Число в основании base"
    )
    append: bool = Field(
        True, description="Вернуть число с контрольной цифрой (иначе только цифру)"
    )

    model_config = {"frozen": True}

    @field_validator("number")
    @classmethod
    def validate_number_digits(cls, v: str, info) -> str:
        """Проверка, что все цифры числа валидны для base"""
        if "base" not in info.data:
            return v
        return validate_digit_string(v, info.data["base"])


# =============================================================================
# RESULT
# =============================================================================


class ChecksumResult(BaseModel):
    """
    Результат вычисления контрольной цифры.

    Инварианты:
    1. Все цифры payload и check_digit валидны для base
    2. number_with_checksum == payload + check_digit
    3. Взвешенная сумма number_with_checksum (factor с 1) кратна base
    """

    base: int = Field(..., ge=MIN_BASE, le=MAX_BASE, description="Основание (2..36)")
    payload: str = Field(
        ..., min_length=1, pattern=NORMALIZED_DIGITS_PATTERN, description="Число без контрольной цифры"
    )
    check_digit: str = Field(
        ..., min_length=1, max_length=1, pattern=NORMALIZED_DIGITS_PATTERN, description="Контрольная цифра"
    )
    number_with_checksum: str = Field(
        ..., min_length=2, pattern=NORMALIZED_DIGITS_PATTERN, description="Число с контрольной цифрой"
    )
    append: bool = Field(
        True, description="render() по умолчанию возвращает число с контрольной цифрой"
    )

    model_config = {"frozen": True}

    @field_validator("payload")
    @classmethod
    def validate_payload_in_base(cls, v: str, info) -> str:
        """Проверка, что все цифры payload валидны для base"""
        if "base" in info.data:
            validate_digit_string(v, info.data["base"])
        return v

    @field_validator("check_digit")
    @classmethod
    def validate_check_digit_in_base(cls, v: str, info) -> str:
        """Проверка, что контрольная цифра валидна для base"""
        if "base" in info.data:
            digit_value(v, info.data["base"])
        return v

    @field_validator("number_with_checksum")
    @classmethod
    def validate_composition(cls, v: str, info) -> str:
        """
        Проверка, что number_with_checksum = payload + check_digit
        и что контрольная цифра верна для payload.
        """
        if not {"base", "payload", "check_digit"} <= info.data.keys():
            return v

        expected = info.data["payload"] + info.data["check_digit"]
        if v != expected:
            raise ValueError(
                f"number_with_checksum {v!r} must equal payload + check_digit {expected!r}"
            )

        base = info.data["base"]
        if luhn_weighted_sum(v, base, initial_factor=1) % base != 0:
            raise ValueError(
                f"check_digit {info.data['check_digit']!r} is not the Luhn mod {base} "
                f"check digit of {info.data['payload']!r}"
            )

        return v

    def render(self, append: bool | None = None) -> str:
        """
        Строковое представление результата.

        Args:
            append: True → число с контрольной цифрой, False → только цифра
                (default: self.append, флаг исходного запроса)

        Returns:
            number_with_checksum или check_digit
        """
        if append is None:
            append = self.append
        return self.number_with_checksum if append else self.check_digit

    def to_request(self) -> ChecksumRequest:
        """Запрос, который воспроизводит этот результат."""
        return ChecksumRequest(base=self.base, number=self.payload, append=self.append)


# =============================================================================
# VERIFICATION
# =============================================================================


class ChecksumVerification(BaseModel):
    """Результат проверки числа с контрольной цифрой."""

    base: int = Field(..., ge=MIN_BASE, le=MAX_BASE, description="Основание (2..36)")
    number: str = Field(
        ..., min_length=1, pattern=NORMALIZED_DIGITS_PATTERN, description="Проверенное число"
    )
    valid: bool = Field(..., description="Контрольная цифра верна")

    model_config = {"frozen": True}
