"""
Policies — бинарные компараторы для reduction

Total-order политика:
- total_max(a, b) / total_min(a, b)
- Требует total order; при равенстве возвращается ЛЮБОЙ из операндов
  (сейчас: max → правый, min → левый; вызывающий код не должен на это полагаться)

Partial-order политика:
- partial_max(a, b) / partial_min(a, b)
- Совпадает с total-order версией, если a и b сравнимы
- Несравнимость разрешается ПОЗИЦИОННО, а не игнорированием NaN:
    * правый операнд b несравним → возвращается b (poisoning)
    * левый операнд a несравним, b сравним → возвращается b (exclusion)

TAIL POISONING (следствие right fold, см. reduction):
    NaN последним операндом → результат NaN
    NaN в любой другой позиции → исключается из результата

Это асимметричное поведение — часть публичного контракта, не дефект.
"""

from typing import TypeVar

import structlog

from extrema.core.domain.ordering import Comparability, partial_cmp

logger = structlog.get_logger(__name__)

T = TypeVar("T")


# =============================================================================
# TOTAL ORDER
# =============================================================================


def total_max(a: T, b: T) -> T:
    """
    Больший из двух операндов при total order.

    Args:
        a: Левый операнд
        b: Правый операнд

    Returns:
        a если b < a, иначе b

    Examples:
        >>> total_max(3, 7)
        7
        >>> total_max("b", "a")
        'b'
    """
    if b < a:
        return a
    return b


def total_min(a: T, b: T) -> T:
    """
    Меньший из двух операндов при total order.

    Returns:
        b если b < a, иначе a
    """
    if b < a:
        return b
    return a


# =============================================================================
# PARTIAL ORDER
# =============================================================================


def _log_incomparable(operation: str, a: object, b: object) -> None:
    # b несравним сам с собой → это NaN-подобное значение, оно и вернётся
    poisoned = partial_cmp(b, b) is Comparability.INCOMPARABLE
    logger.debug(
        "incomparable_operands",
        operation=operation,
        left=repr(a),
        right=repr(b),
        outcome="poisoned" if poisoned else "excluded",
    )


def partial_max(a: T, b: T, *, log: bool = False) -> T:
    """
    Больший из двух операндов при partial order.

    Args:
        a: Левый операнд (ближе к началу исходного списка)
        b: Правый операнд (результат свёртки хвоста списка)
        log: Писать DEBUG событие incomparable_operands при несравнимости

    Returns:
        a если a > b, иначе b (в том числе когда a и b несравнимы)

    Examples:
        >>> partial_max(1.0, 2.0)
        2.0
        >>> partial_max(float("nan"), 2.0)
        2.0
        >>> partial_max(2.0, float("nan"))
        nan
    """
    ordering = partial_cmp(a, b)
    if ordering is Comparability.GREATER:
        return a
    if log and ordering is Comparability.INCOMPARABLE:
        _log_incomparable("max_partial", a, b)
    return b


def partial_min(a: T, b: T, *, log: bool = False) -> T:
    """
    Меньший из двух операндов при partial order.

    Args:
        a: Левый операнд
        b: Правый операнд
        log: Писать DEBUG событие incomparable_operands при несравнимости

    Returns:
        a если a < b, иначе b (в том числе когда a и b несравнимы)
    """
    ordering = partial_cmp(a, b)
    if ordering is Comparability.LESS:
        return a
    if log and ordering is Comparability.INCOMPARABLE:
        _log_incomparable("min_partial", a, b)
    return b
