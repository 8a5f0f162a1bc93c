from .config import ParserSettings
from .errors import CalcError, EvalError, EvalErrorKind, ParseError
from .evaluator import calculate_expression, evaluate
from .expr import BinaryOp, Expression, Number, Op
from .parser import Cursor, parse

__all__ = [
    "BinaryOp",
    "CalcError",
    "Cursor",
    "EvalError",
    "EvalErrorKind",
    "Expression",
    "Number",
    "Op",
    "ParseError",
    "ParserSettings",
    "calculate_expression",
    "evaluate",
    "parse",
]
