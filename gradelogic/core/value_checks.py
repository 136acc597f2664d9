import math
from collections.abc import Mapping, Set
from dataclasses import dataclass
from numbers import Real
from typing import Any, Callable


def _is_real(value: Any) -> bool:
    # bool является подклассом int, но числом для упражнений не считается
    return isinstance(value, Real) and not isinstance(value, bool)


def deep_equal(actual: Any, expected: Any) -> bool:
    """
    Строгое структурное сравнение значений.

    - bool никогда не равен числу, int и float сравниваются по значению;
    - NaN равен NaN;
    - списки и кортежи сравниваются поэлементно с учетом порядка
      и должны быть одного типа последовательности;
    - словари сравниваются как неупорядоченные наборы ключей;
    - множества сравниваются по составу.
    """
    if isinstance(expected, bool) or isinstance(actual, bool):
        return isinstance(actual, bool) and isinstance(expected, bool) and actual is expected

    if _is_real(expected) or _is_real(actual):
        if not (_is_real(actual) and _is_real(expected)):
            return False
        if isinstance(actual, float) and isinstance(expected, float) \
                and math.isnan(actual) and math.isnan(expected):
            return True
        return actual == expected

    if expected is None or actual is None:
        return actual is None and expected is None

    if isinstance(expected, str) or isinstance(actual, str):
        return isinstance(actual, str) and isinstance(expected, str) and actual == expected

    if isinstance(expected, Mapping):
        if not isinstance(actual, Mapping) or len(actual) != len(expected):
            return False
        for key, value in expected.items():
            if key not in actual or not deep_equal(actual[key], value):
                return False
        return True

    if isinstance(expected, (list, tuple)):
        if type(actual) is not type(expected) or len(actual) != len(expected):
            return False
        return all(deep_equal(a, e) for a, e in zip(actual, expected))

    if isinstance(expected, Set):
        return isinstance(actual, Set) and set(actual) == set(expected)

    return type(actual) is type(expected) and actual == expected


@dataclass(frozen=True)
class ValuePredicate:
    """Именованный предикат над возвращенным значением."""
    description: str
    fn: Callable[[Any], bool]

    def __call__(self, value: Any) -> bool:
        return bool(self.fn(value))


def _float_nan(value: Any) -> bool:
    # Целые не бывают NaN; math.isnan(10 ** 400) бросает OverflowError
    return isinstance(value, float) and math.isnan(value)


def is_number(value: Any) -> bool:
    return _is_real(value) and not _float_nan(value)


def is_finite_number(value: Any) -> bool:
    if not is_number(value):
        return False
    return not isinstance(value, float) or math.isfinite(value)


def is_integer(value: Any) -> bool:
    if isinstance(value, int) and not isinstance(value, bool):
        return True
    return is_finite_number(value) and float(value).is_integer()


def is_float(value: Any) -> bool:
    """Число с дробной частью."""
    if isinstance(value, int):
        return False
    return is_finite_number(value) and not float(value).is_integer()


def is_nan(value: Any) -> bool:
    return _is_real(value) and _float_nan(value)


def is_boolean(value: Any) -> bool:
    return value is True or value is False


def is_mapping(value: Any) -> bool:
    return value is not None and isinstance(value, Mapping)


def count_keys(value: Mapping) -> int:
    return len(value.keys())


IS_NUMBER = ValuePredicate("является числом", is_number)
IS_FINITE_NUMBER = ValuePredicate("является конечным числом", is_finite_number)
IS_INTEGER = ValuePredicate("является целым числом", is_integer)
IS_FLOAT = ValuePredicate("является дробным числом", is_float)
IS_NAN = ValuePredicate("является NaN (not a number)", is_nan)
IS_BOOLEAN = ValuePredicate("является логическим значением (True или False)", is_boolean)
IS_CALLABLE = ValuePredicate("является вызываемым объектом", callable)
IS_MAPPING = ValuePredicate("является словарем", is_mapping)


def has_key_count(n: int) -> ValuePredicate:
    return ValuePredicate(
        f"является словарем с {n} ключами",
        lambda value: is_mapping(value) and count_keys(value) == n,
    )
