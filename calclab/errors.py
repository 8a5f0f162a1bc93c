from enum import Enum


class CalcError(Exception):
    """Общий предок ошибок разбора и вычисления."""
    pass


class ParseError(CalcError):
    """Синтаксическая ошибка при разборе выражения."""

    def __init__(self, message: str, position: int = 0, context: str = ""):
        self.message = message
        self.position = position
        # Неразобранный остаток входа с места ошибки
        self.context = context
        super().__init__(f"{message} (position {position})")


class EvalErrorKind(Enum):
    DIVISION_BY_ZERO = "Division by zero"


class EvalError(CalcError):
    """Ошибка при вычислении дерева (пока только деление на ноль)."""

    def __init__(self, kind: EvalErrorKind):
        self.kind = kind
        super().__init__(kind.value)
