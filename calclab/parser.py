import logging

from .config import DEFAULT_SETTINGS, ParserSettings
from .errors import ParseError
from .expr import BinaryOp, Expression, Number, Op

logger = logging.getLogger(__name__)

DIGITS = '0123456789'


# Парсер: курсор по входной строке, токены распознаются прямо в правилах грамматики
class Cursor:
    def __init__(self, text: str, settings: ParserSettings = DEFAULT_SETTINGS):
        self.text = text
        self.pos = 0
        self.depth = 0
        self.settings = settings

    def skip_whitespace(self):
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1

    def peek(self):
        self.skip_whitespace()
        return self.text[self.pos] if self.pos < len(self.text) else None

    def consume(self, expected: str) -> bool:
        self.skip_whitespace()
        if self.text.startswith(expected, self.pos):
            self.pos += len(expected)
            return True
        return False

    def consume_number(self):
        """
        Число: необязательный '-' и сразу за ним одна или больше цифр (жадно).
        Дробей и экспоненты нет. Одиночный '-' числом не считается,
        в этом случае курсор не двигается и возвращается None.
        """
        self.skip_whitespace()
        start = i = self.pos
        n = len(self.text)
        if i < n and self.text[i] == '-':
            i += 1
        digits_start = i
        while i < n and self.text[i] in DIGITS:
            i += 1
        if i == digits_start:
            return None
        self.pos = i
        return float(self.text[start:i])

    def at_end(self) -> bool:
        return self.peek() is None

    def rest(self) -> str:
        return self.text[self.pos:]

    def error(self, message: str) -> ParseError:
        return ParseError(message, self.pos, self.rest())


# Правила: atom, muldiv, addsub
def parse_atom(cur: Cursor):
    """atom → '(' addsub ')' | number"""
    if cur.consume('('):
        if cur.depth >= cur.settings.max_depth:
            raise cur.error("Expression nested too deeply")
        cur.depth += 1
        expr = parse_addsub(cur)
        cur.depth -= 1
        if not cur.consume(')'):
            raise cur.error("Mismatched parenthesis")
        return expr
    value = cur.consume_number()
    if value is None:
        raise cur.error("Expected number or '('")
    return Number(value)


def parse_muldiv(cur: Cursor):
    """
    muldiv → atom ((*|/|неявное) atom)*
    Левая ассоциативность. Неявное умножение проверяется после явных
    операторов: если дальше стоит '(', это 2(3) == 2 * (3).
    """
    left = parse_atom(cur)
    while True:
        if cur.consume('*'):
            op = Op.MUL
        elif cur.consume('/'):
            op = Op.DIV
        elif cur.peek() == '(':
            op = Op.MUL
        else:
            break
        right = parse_atom(cur)
        left = BinaryOp(left, op, right)
    return left


def parse_addsub(cur: Cursor):
    """
    addsub → muldiv ((+|-) muldiv)*
    Левая ассоциативность: 10 - 2 - 3 = (10 - 2) - 3.
    """
    left = parse_muldiv(cur)
    while True:
        if cur.consume('+'):
            op = Op.ADD
        elif cur.consume('-'):
            op = Op.SUB
        else:
            break
        right = parse_muldiv(cur)
        left = BinaryOp(left, op, right)
    return left


def parse(expression: str, settings: ParserSettings = None) -> Expression:
    if settings is None:
        settings = DEFAULT_SETTINGS
    cur = Cursor(expression, settings)
    try:
        tree = parse_addsub(cur)
        # Проверяем, что всё выражение израсходовано
        if not cur.at_end() and not settings.allow_trailing_input:
            raise cur.error("Unexpected trailing input")
    except ParseError as exc:
        logger.debug("Failed to parse %r: %s", expression, exc)
        raise
    if not cur.at_end():
        logger.debug("Ignoring trailing input %r", cur.rest())
    logger.debug("Parsed %r as %s", expression, tree)
    return tree
