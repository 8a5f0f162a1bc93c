import logging

from .config import ParserSettings
from .errors import EvalError, EvalErrorKind
from .expr import BinaryOp, Expression, Op
from .parser import parse

logger = logging.getLogger(__name__)


def _apply_op(op: Op, a: float, b: float) -> float:
    # Деление на ноль: точное сравнение, без допуска
    if op is Op.DIV and b == 0:
        raise EvalError(EvalErrorKind.DIVISION_BY_ZERO)
    if op is Op.ADD:
        return a + b
    if op is Op.SUB:
        return a - b
    if op is Op.MUL:
        return a * b
    return a / b


def evaluate(tree: Expression) -> float:
    """
    Свёртка дерева в число. Левый операнд вычисляется раньше правого,
    inf и nan от прочих операций не проверяются.
    """
    values = []
    try:
        for node in tree.walk():
            if isinstance(node, BinaryOp):
                right = values.pop()
                left = values.pop()
                values.append(_apply_op(node.op, left, right))
            else:
                values.append(float(node.value))
    except EvalError as exc:
        logger.debug("Evaluation of %s failed: %s", tree, exc)
        raise
    result = values.pop()
    logger.debug("Evaluated %s = %r", tree, result)
    return result


def calculate_expression(expression: str, settings: ParserSettings = None) -> float:
    tree = parse(expression, settings)
    return evaluate(tree)
