"""
Ordering — capability порядка и partial comparison

Модуль отвечает на два вопроса:
1. Какой порядок поддерживает тип операндов (TOTAL / PARTIAL / NONE)
2. Как сравниваются два значения при partial order (Comparability)

Total order: отношение рефлексивно, антисимметрично, транзитивно и
определено для ЛЮБОЙ пары (int, str, tuple, Fraction, dataclass(order=True)).

Partial order: часть пар несравнима (float NaN, Decimal NaN, множества
по отношению включения). Для таких типов max()/min() запрещены,
разрешены только max_partial()/min_partial().

ИНВАРИАНТЫ:
1. partial_cmp детерминирован и никогда не бросает исключение на quiet NaN
2. Тип контейнера определяет порядок по своему классу, не по содержимому
3. Реестр partial-типов только пополняется
"""

from decimal import Decimal
from enum import Enum


# =============================================================================
# ENUMS
# =============================================================================


class Comparability(str, Enum):
    """Результат partial comparison двух значений."""

    LESS = "LESS"
    EQUAL = "EQUAL"
    GREATER = "GREATER"
    INCOMPARABLE = "INCOMPARABLE"


class OrderKind(str, Enum):
    """
    Ordering capability типа.

    - TOTAL: допустимы max/min и max_partial/min_partial
    - PARTIAL: допустимы только max_partial/min_partial
    - NONE: сравнение не определено (операнды не сравниваются вовсе)
    """

    TOTAL = "TOTAL"
    PARTIAL = "PARTIAL"
    NONE = "NONE"


# =============================================================================
# REGISTRY
# =============================================================================

# Типы, у которых `<` определён, но часть пар несравнима
_PARTIAL_ORDER_TYPES: set[type] = {float, Decimal, set, frozenset}

# Типы, у которых rich comparison объявлен, но `<` всегда TypeError
_UNORDERED_TYPES: set[type] = {complex, dict}


def register_partial_order(cls: type) -> type:
    """
    Регистрация типа как partially ordered.

    Можно использовать как декоратор класса. Подклассы наследуют регистрацию.

    Args:
        cls: Тип с `<`, для которого часть пар несравнима

    Returns:
        Тот же cls (для использования как декоратор)

    Examples:
        >>> @register_partial_order
        ... class Interval: ...
    """
    if not isinstance(cls, type):
        raise TypeError(f"register_partial_order expects a class, got {cls!r}")
    _PARTIAL_ORDER_TYPES.add(cls)
    return cls


def _defines_lt(tp: type) -> bool:
    # object.__lt__ всегда возвращает NotImplemented
    return any("__lt__" in vars(klass) for klass in tp.__mro__ if klass is not object)


def order_kind(tp: type) -> OrderKind:
    """
    Ordering capability типа.

    Порядок проверок:
    1. Явно неупорядоченные типы (complex, dict) → NONE
    2. Зарегистрированные partial-типы и классы с `__partial_order__ = True` → PARTIAL
    3. Класс не переопределяет `__lt__` → NONE
    4. Иначе → TOTAL

    Args:
        tp: Проверяемый тип

    Returns:
        OrderKind
    """
    if issubclass(tp, tuple(_UNORDERED_TYPES)):
        return OrderKind.NONE

    if getattr(tp, "__partial_order__", False) or issubclass(tp, tuple(_PARTIAL_ORDER_TYPES)):
        return OrderKind.PARTIAL

    if not _defines_lt(tp):
        return OrderKind.NONE

    return OrderKind.TOTAL


def is_totally_ordered(tp: type) -> bool:
    """True если тип поддерживает total order."""
    return order_kind(tp) is OrderKind.TOTAL


def is_partially_ordered(tp: type) -> bool:
    """True если тип поддерживает хотя бы partial order (total тоже подходит)."""
    return order_kind(tp) is not OrderKind.NONE


# =============================================================================
# PARTIAL COMPARISON
# =============================================================================


def _decimal_cmp(a: Decimal, b: Decimal) -> Comparability:
    # `<` на NaN и compare() на sNaN бросают InvalidOperation
    if a.is_nan() or b.is_nan():
        return Comparability.INCOMPARABLE
    result = a.compare(b)
    if result < 0:
        return Comparability.LESS
    if result > 0:
        return Comparability.GREATER
    return Comparability.EQUAL


def partial_cmp(a, b) -> Comparability:
    """
    Детерминированное partial comparison.

    Алгоритм:
        a < b  → LESS
        a > b  → GREATER
        a == b → EQUAL
        иначе  → INCOMPARABLE

    Args:
        a: Левый операнд
        b: Правый операнд

    Returns:
        Comparability

    Examples:
        >>> partial_cmp(1.0, 2.0)
        <Comparability.LESS: 'LESS'>
        >>> partial_cmp(float("nan"), 2.0)
        <Comparability.INCOMPARABLE: 'INCOMPARABLE'>
        >>> partial_cmp({1}, {2})
        <Comparability.INCOMPARABLE: 'INCOMPARABLE'>
    """
    if isinstance(a, Decimal) and isinstance(b, Decimal):
        return _decimal_cmp(a, b)

    if a < b:
        return Comparability.LESS
    if a > b:
        return Comparability.GREATER
    if a == b:
        return Comparability.EQUAL
    return Comparability.INCOMPARABLE
