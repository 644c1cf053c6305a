"""
Errors — нарушения контракта вызова

Все ошибки этого модуля обнаруживаются ДО первого сравнения операндов:
- пустой список операндов
- несогласованные типы операндов (без numeric promotion)
- тип без требуемой ordering capability

Несравнимые операнды (NaN) ошибкой НЕ являются: partial-order политика
возвращает их по правилу tail poisoning, никогда не бросая исключение.

Все классы наследуют TypeError: в Python это ближайший аналог отказа
на этапе компиляции (как у builtin max() без аргументов).
"""


class ExtremaError(Exception):
    """Базовый класс ошибок extrema."""

    pass


class EmptyOperandListError(ExtremaError, TypeError):
    """
    Вызов без операндов.

    Reduction определена только для n >= 1: у пустого списка нет ни
    максимума, ни минимума, и fallback-значение не подставляется.
    """

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation}() requires at least one operand, got 0")


class OperandTypeMismatchError(ExtremaError, TypeError):
    """
    Операнды разных типов.

    Типы согласованы, только если один является подклассом другого.
    int и float вместе ЗАПРЕЩЕНЫ: numeric promotion не выполняется.
    """

    def __init__(self, operation: str, position: int, expected: type, actual: type):
        self.operation = operation
        self.position = position
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{operation}(): operand {position} has type {actual.__qualname__}, "
            f"inconsistent with {expected.__qualname__}"
        )


class OrderingCapabilityError(ExtremaError, TypeError):
    """
    Тип операндов не поддерживает требуемый порядок.

    Пример: max() над float (только partial order) или над типом без `<`.
    """

    def __init__(self, operation: str, operand_type: type, required: str):
        self.operation = operation
        self.operand_type = operand_type
        self.required = required
        super().__init__(
            f"{operation}() requires a {required} order, "
            f"but {operand_type.__qualname__} does not provide one"
        )
