"""
Digits — алфавит цифр и валидация оснований 2..36

Модуль задаёт единственное допустимое отображение символ ↔ значение цифры
для чисел в основаниях от 2 до 36:
- '0'..'9' → 0..9
- 'a'..'z' (без учёта регистра) → 10..35

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Отображение тотально: любой символ вне алфавита или со значением >= base
   приводит к InvalidDigitError, никогда не к молчаливому приведению
2. Основание проверяется всегда (не через assert) до любых вычислений
3. Выходные символы всегда в нижнем регистре
"""

from typing import Final

# =============================================================================
# КОНСТАНТЫ АЛФАВИТА
# =============================================================================

# Канонический алфавит: индекс символа = значение цифры
DIGIT_ALPHABET: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyz"

# Допустимый диапазон оснований (включительно)
MIN_BASE: Final[int] = 2
MAX_BASE: Final[int] = len(DIGIT_ALPHABET)

# Контрольная сумма Luhn mod N всегда занимает ровно одну позицию
CHECKSUM_LENGTH: Final[int] = 1

# Оба регистра: lower() не применяется до проверки (U+212A → "k")
_DIGIT_VALUES: Final[dict[str, int]] = {
    **{char.upper(): value for value, char in enumerate(DIGIT_ALPHABET)},
    **{char: value for value, char in enumerate(DIGIT_ALPHABET)},
}


# =============================================================================
# EXCEPTIONS
# =============================================================================


class LuhnModNError(ValueError):
    """Базовая ошибка входных данных для Luhn mod N."""


class InvalidBaseError(LuhnModNError):
    """Основание вне диапазона [MIN_BASE, MAX_BASE] или не является int."""


class InvalidDigitError(LuhnModNError):
    """Символ не принадлежит алфавиту или его значение >= base."""


class EmptyInputError(LuhnModNError):
    """Пустая строка цифр там, где требуется хотя бы один символ."""


# =============================================================================
# ВАЛИДАЦИЯ ОСНОВАНИЯ
# =============================================================================


def validate_base(base: int) -> int:
    """
    Валидация основания системы счисления.

    bool формально является int, но как основание не принимается.

    Args:
        base: Проверяемое основание

    Returns:
        base без изменений

    Raises:
        InvalidBaseError: Если base не int или вне [2, 36]

    Examples:
        >>> validate_base(16)
        16
        >>> validate_base(37)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        InvalidBaseError: Base needs to be between 2 and 36, got 37
    """
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidBaseError(f"Base must be an int, got {base!r}")

    if base < MIN_BASE or base > MAX_BASE:
        raise InvalidBaseError(
            f"Base needs to be between {MIN_BASE} and {MAX_BASE}, got {base}"
        )

    return base


# =============================================================================
# ОТОБРАЖЕНИЕ СИМВОЛ ↔ ЗНАЧЕНИЕ
# =============================================================================


def digit_value(char: str, base: int) -> int:
    """
    Значение одной цифры в заданном основании.

    Args:
        char: Один символ алфавита (регистр не важен)
        base: Основание (2..36)

    Returns:
        Значение цифры в диапазоне [0, base - 1]

    Raises:
        InvalidBaseError: Если base невалидно
        InvalidDigitError: Если символ вне алфавита или значение >= base

    Examples:
        >>> digit_value("F", 16)
        15
        >>> digit_value("7", 8)
        7
    """
    validate_base(base)

    value = _DIGIT_VALUES.get(char)
    if value is None:
        raise InvalidDigitError(f"{char!r} is not a digit of alphabet 0-9a-z")

    if value >= base:
        raise InvalidDigitError(
            f"Digit {char!r} (value {value}) is not valid in base {base}"
        )

    return value


def digit_char(value: int, base: int) -> str:
    """
    Символ цифры для значения в заданном основании (нижний регистр).

    Args:
        value: Значение цифры
        base: Основание (2..36)

    Returns:
        Один символ алфавита

    Raises:
        InvalidBaseError: Если base невалидно
        InvalidDigitError: Если value вне [0, base - 1]

    Examples:
        >>> digit_char(15, 16)
        'f'
        >>> digit_char(35, 36)
        'z'
    """
    validate_base(base)

    if value < 0 or value >= base:
        raise InvalidDigitError(
            f"Digit value {value} is out of range [0, {base - 1}] for base {base}"
        )

    return DIGIT_ALPHABET[value]


def validate_digit_string(number: str, base: int) -> str:
    """
    Валидация и нормализация строки цифр.

    Args:
        number: Строка цифр (регистр не важен)
        base: Основание (2..36)

    Returns:
        Строка в нижнем регистре, все цифры которой валидны для base

    Raises:
        InvalidBaseError: Если base невалидно
        EmptyInputError: Если строка пустая
        InvalidDigitError: Если хотя бы один символ невалиден (с позицией)
    """
    validate_base(base)
    require_non_empty(number)

    for position, char in enumerate(number):
        value = _DIGIT_VALUES.get(char)
        if value is None or value >= base:
            raise InvalidDigitError(
                f"Invalid digit {char!r} at position {position} "
                f"for base {base}"
            )

    return number.lower()


def require_non_empty(number: str) -> str:
    """
    Проверка, что строка цифр не пустая.

    Raises:
        EmptyInputError: Если number == ""
    """
    if not number:
        raise EmptyInputError("Number must contain at least one digit")
    return number


# =============================================================================
# ВЗВЕШЕННАЯ СУММА LUHN MOD N
# =============================================================================


def luhn_weighted_sum(normalized: str, base: int, initial_factor: int) -> int:
    """
    Взвешенная сумма цифр справа налево с редукцией addend по основанию.

    Веса чередуются 2, 1, 2, ... или 1, 2, 1, ... начиная с initial_factor
    для самой правой цифры. addend = factor * value сворачивается в
    addend // base + addend % base.

    Args:
        normalized: Строка, уже прошедшая validate_digit_string для base
        base: Основание (2..36)
        initial_factor: Вес самой правой цифры (2 при вычислении, 1 при проверке)

    Returns:
        Сумма; число валидно, если сумма с initial_factor=1 кратна base
    """
    factor = initial_factor
    total = 0

    for char in reversed(normalized):
        addend = factor * _DIGIT_VALUES[char]
        total += addend // base + addend % base
        factor = 1 if factor == 2 else 2

    return total
