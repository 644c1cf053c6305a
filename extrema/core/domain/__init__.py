"""
Domain модели extrema

Ordering capabilities и конфигурация reduction.
"""

from .config import DEFAULT_CONFIG, ReductionConfig
from .ordering import (
    Comparability,
    OrderKind,
    is_partially_ordered,
    is_totally_ordered,
    order_kind,
    partial_cmp,
    register_partial_order,
)

__all__ = [
    # Config
    "DEFAULT_CONFIG",
    "ReductionConfig",
    # Ordering — Enums
    "Comparability",
    "OrderKind",
    # Ordering — Functions
    "is_partially_ordered",
    "is_totally_ordered",
    "order_kind",
    "partial_cmp",
    "register_partial_order",
]
