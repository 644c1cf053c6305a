"""
extrema — variadic max/min для total и partial order

Максимум или минимум фиксированного списка значений без временного
контейнера:

    >>> from extrema import max, max_partial
    >>> max(1, 5, 7, 2, 4, 9, 3)
    9
    >>> max_partial(1.8, float("nan"), 9.8)
    9.8

max/min требуют total order; max_partial/min_partial допускают partial
order (float, Decimal) и следуют правилу tail poisoning: несравнимое
значение последним операндом становится результатом, в любой другой
позиции оно исключается.

Импорт `from extrema import max, min` перекрывает builtins только в
импортирующем модуле.
"""

# Reduction
from extrema.core.math import (
    fold_right,
    max,
    max_partial,
    min,
    min_partial,
    partial_max,
    partial_min,
    total_max,
    total_min,
)

# Ordering & config
from extrema.core.domain import (
    DEFAULT_CONFIG,
    Comparability,
    OrderKind,
    ReductionConfig,
    is_partially_ordered,
    is_totally_ordered,
    order_kind,
    partial_cmp,
    register_partial_order,
)

# Errors
from extrema.core.errors import (
    EmptyOperandListError,
    ExtremaError,
    OperandTypeMismatchError,
    OrderingCapabilityError,
)

# Logging
from extrema.core.logging import configure_logging

__version__ = "0.1.0"

__all__ = [
    # Reduction — Operations
    "max",
    "min",
    "max_partial",
    "min_partial",
    # Reduction — Skeleton & policies
    "fold_right",
    "partial_max",
    "partial_min",
    "total_max",
    "total_min",
    # Ordering
    "Comparability",
    "OrderKind",
    "is_partially_ordered",
    "is_totally_ordered",
    "order_kind",
    "partial_cmp",
    "register_partial_order",
    # Config
    "DEFAULT_CONFIG",
    "ReductionConfig",
    # Errors
    "EmptyOperandListError",
    "ExtremaError",
    "OperandTypeMismatchError",
    "OrderingCapabilityError",
    # Logging
    "configure_logging",
]
