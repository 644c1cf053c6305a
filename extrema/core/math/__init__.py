"""
Core math modules для extrema

Бинарные компараторы и variadic reduction поверх них.
"""

# Policies
from extrema.core.math.policies import (
    partial_max,
    partial_min,
    total_max,
    total_min,
)

# Reduction
from extrema.core.math.reduction import (
    fold_right,
    max,
    max_partial,
    min,
    min_partial,
)

__all__ = [
    # Policies — Total order
    "total_max",
    "total_min",
    # Policies — Partial order
    "partial_max",
    "partial_min",
    # Reduction — Skeleton
    "fold_right",
    # Reduction — Operations
    "max",
    "max_partial",
    "min",
    "min_partial",
]
