"""
Reduction — variadic max/min через right fold

Публичные операции:
- max(*operands)          : total order
- min(*operands)          : total order
- max_partial(*operands)  : partial order, tail poisoning
- min_partial(*operands)  : partial order, tail poisoning

СКЕЛЕТ (right fold):
    op(x1, x2, ..., xn) = cmp(x1, cmp(x2, ... cmp(x_{n-1}, x_n)))
    op(x1) = x1 (компаратор не вызывается)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый операнд вычисляется ровно один раз, слева направо
   (это аргументы вызова); комбинирование идёт от хвоста к голове
2. n == 0 → EmptyOperandListError до любого сравнения
3. Несогласованные типы → OperandTypeMismatchError (без numeric promotion)
4. max/min над partial-типом (float, Decimal) → OrderingCapabilityError
5. Несравнимый операнд НИКОГДА не приводит к исключению:
   последний в списке → результат несравним (poisoning),
   в любой другой позиции → исключается

ПРИМЕРЫ:
    max(1, 5, 7, 2, 4, 9, 3)                        → 9
    max_partial(1.8, 5.8, 2.8, 4.8, 9.8, 3.8, nan)  → nan
    max_partial(1.8, 5.8, nan, 2.8, 4.8, 9.8, 3.8)  → 9.8
"""

from functools import partial
from typing import Callable, TypeVar

import structlog

from extrema.core.domain.config import DEFAULT_CONFIG, ReductionConfig
from extrema.core.domain.ordering import OrderKind, order_kind
from extrema.core.errors import (
    EmptyOperandListError,
    OperandTypeMismatchError,
    OrderingCapabilityError,
)
from extrema.core.math.policies import partial_max, partial_min, total_max, total_min

logger = structlog.get_logger(__name__)

T = TypeVar("T")


# =============================================================================
# RIGHT FOLD
# =============================================================================


def fold_right(comparator: Callable[[T, T], T], *operands: T) -> T:
    """
    Right-ассоциативная свёртка бинарного компаратора.

    Итеративная реализация: глубина стека не зависит от числа операндов.

    Args:
        comparator: Чистая функция (a, b) → a или b
        *operands: Непустой список операндов

    Returns:
        comparator(x1, comparator(x2, ... comparator(x_{n-1}, x_n)))

    Raises:
        EmptyOperandListError: Если операндов нет

    Examples:
        >>> fold_right(lambda a, b: f"({a} {b})", 1, 2, 3)
        '(1 (2 3))'
        >>> fold_right(lambda a, b: a + b, 42)
        42
    """
    if not operands:
        raise EmptyOperandListError("fold_right")

    result = operands[-1]
    for operand in reversed(operands[:-1]):
        result = comparator(operand, result)
    return result


# =============================================================================
# ПРОВЕРКИ КОНТРАКТА
# =============================================================================


def _is_builtin(tp: type) -> bool:
    return tp.__module__ == "builtins"


def _common_type(operation: str, operands: tuple[T, ...]) -> type:
    # Подкласс допустим только для builtin базы (bool/int, подкласс float):
    # dataclass(order=True) сравнивает лишь экземпляры ровно своего класса
    common = type(operands[0])
    for position, operand in enumerate(operands[1:], start=1):
        operand_type = type(operand)
        if operand_type is common:
            continue
        if issubclass(operand_type, common) and _is_builtin(common):
            continue
        if issubclass(common, operand_type) and _is_builtin(operand_type):
            common = operand_type
            continue
        raise OperandTypeMismatchError(operation, position, common, operand_type)
    return common


def _check_capability(operation: str, operand_type: type, required: OrderKind) -> None:
    kind = order_kind(operand_type)
    if required is OrderKind.TOTAL and kind is not OrderKind.TOTAL:
        raise OrderingCapabilityError(operation, operand_type, "total")
    if kind is OrderKind.NONE:
        raise OrderingCapabilityError(operation, operand_type, "partial")


def _reduce(
    operation: str,
    comparator: Callable[[T, T], T],
    required: OrderKind,
    operands: tuple[T, ...],
    config: ReductionConfig | None,
) -> T:
    if config is None:
        config = DEFAULT_CONFIG

    try:
        if not operands:
            raise EmptyOperandListError(operation)

        # Базовый случай: без сравнений и без требований к порядку
        if len(operands) == 1:
            return operands[0]

        if config.check_operand_types:
            operand_type = _common_type(operation, operands)
        else:
            operand_type = type(operands[0])

        if config.check_ordering_capability:
            _check_capability(operation, operand_type, required)
    except (EmptyOperandListError, OperandTypeMismatchError, OrderingCapabilityError) as e:
        if config.log_events:
            logger.debug(
                "reduction_rejected",
                operation=operation,
                operand_count=len(operands),
                error=type(e).__name__,
                reason=str(e),
            )
        raise

    return fold_right(comparator, *operands)


# =============================================================================
# TOTAL ORDER
# =============================================================================


def max(*operands: T, config: ReductionConfig | None = None) -> T:
    """
    Максимум фиксированного списка операндов при total order.

    При равенстве может вернуться любой из равных операндов.

    Args:
        *operands: Непустой список операндов одного totally ordered типа
        config: Конфигурация проверок (default: DEFAULT_CONFIG)

    Returns:
        Наибольший операнд

    Raises:
        EmptyOperandListError: Нет операндов
        OperandTypeMismatchError: Операнды разных типов
        OrderingCapabilityError: Тип не поддерживает total order (например float)

    Examples:
        >>> max(1, 5, 7, 2, 4, 9, 3)
        9
        >>> max("pear", "apple")
        'pear'
    """
    return _reduce("max", total_max, OrderKind.TOTAL, operands, config)


def min(*operands: T, config: ReductionConfig | None = None) -> T:
    """
    Минимум фиксированного списка операндов при total order.

    При равенстве может вернуться любой из равных операндов.

    Examples:
        >>> min(1, 5, 7, 2, 4, 9, 3)
        1
    """
    return _reduce("min", total_min, OrderKind.TOTAL, operands, config)


# =============================================================================
# PARTIAL ORDER
# =============================================================================


def max_partial(*operands: T, config: ReductionConfig | None = None) -> T:
    """
    Максимум при partial order с tail poisoning.

    Несравнимый операнд (NaN) в ПОСЛЕДНЕЙ позиции становится результатом;
    в любой другой позиции он исключается, и возвращается максимум
    остальных операндов.

    Args:
        *operands: Непустой список операндов одного упорядоченного типа
        config: Конфигурация проверок (default: DEFAULT_CONFIG)

    Returns:
        Наибольший операнд или несравнимый хвост

    Raises:
        EmptyOperandListError: Нет операндов
        OperandTypeMismatchError: Операнды разных типов
        OrderingCapabilityError: Тип не поддерживает даже partial order

    Examples:
        >>> max_partial(1.8, 5.8, 7.8, 2.8, 4.8, 9.8, 3.8)
        9.8
        >>> max_partial(1.8, 5.8, float("nan"), 2.8, 4.8, 9.8, 3.8)
        9.8
        >>> max_partial(1.8, 5.8, 2.8, 4.8, 9.8, 3.8, float("nan"))
        nan
    """
    if config is None:
        config = DEFAULT_CONFIG
    comparator = partial(partial_max, log=config.log_events)
    return _reduce("max_partial", comparator, OrderKind.PARTIAL, operands, config)


def min_partial(*operands: T, config: ReductionConfig | None = None) -> T:
    """
    Минимум при partial order с tail poisoning (правило как у max_partial).

    Examples:
        >>> min_partial(1.8, 5.8, 7.8, 2.8, 4.8, 9.8, 3.8)
        1.8
        >>> min_partial(1.8, float("nan"))
        nan
    """
    if config is None:
        config = DEFAULT_CONFIG
    comparator = partial(partial_min, log=config.log_events)
    return _reduce("min_partial", comparator, OrderKind.PARTIAL, operands, config)
