"""
ReductionConfig — конфигурация проверок и логирования reduction

Immutable Pydantic модель. Передаётся keyword-аргументом `config` в
max/min/max_partial/min_partial; при `config=None` используется DEFAULT_CONFIG.
"""

from pydantic import BaseModel, Field


class ReductionConfig(BaseModel):
    """
    Конфигурация reduction.

    Проверки выполняются до первого сравнения. Отключение проверки
    оставляет семантику сравнения на операторы самих операндов.
    """

    check_operand_types: bool = Field(
        True, description="Отклонять операнды несогласованных типов (без numeric promotion)"
    )
    check_ordering_capability: bool = Field(
        True, description="Отклонять типы без требуемого порядка (max над float и т.п.)"
    )
    log_events: bool = Field(
        False,
        description="DEBUG события structlog: incomparable_operands, reduction_rejected",
    )

    model_config = {"frozen": True, "strict": True}


# Конфигурация по умолчанию: все проверки включены, логирование выключено
DEFAULT_CONFIG: ReductionConfig = ReductionConfig()
