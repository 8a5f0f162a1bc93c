"""Дерево выражения: число или бинарная операция над двумя поддеревьями."""
import math
from dataclasses import dataclass
from enum import Enum


class Op(Enum):
    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'

    def __str__(self):
        return self.value

    @classmethod
    def from_symbol(cls, symbol: str) -> "Op":
        return cls(symbol)


def format_number(value: float) -> str:
    # 3.0 -> "3", чтобы вывод снова разбирался парсером (дробей он не знает)
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return repr(float(value))


class Expression:
    """
    Базовый класс узлов. Узлы неизменяемы, дерево строится снизу вверх парсером.

    Обход сделан на явном стеке: цепочка 1+1+...+1 даёт дерево глубиной
    в число слагаемых, рекурсия Python на нём упирается в лимит.
    """
    __slots__ = ()

    def walk(self):
        """Узлы в обратном порядке: левое поддерево, правое, затем сам узел."""
        stack = [(self, False)]
        while stack:
            node, expanded = stack.pop()
            if isinstance(node, BinaryOp) and not expanded:
                stack.append((node, True))
                stack.append((node.right, False))
                stack.append((node.left, False))
            else:
                yield node

    def depth(self) -> int:
        heights = []
        for node in self.walk():
            if isinstance(node, BinaryOp):
                right = heights.pop()
                left = heights.pop()
                heights.append(max(left, right) + 1)
            else:
                heights.append(1)
        return heights.pop()

    def evaluate(self) -> float:
        from .evaluator import evaluate
        return evaluate(self)

    def __str__(self):
        parts = []
        for node in self.walk():
            if isinstance(node, BinaryOp):
                right = parts.pop()
                left = parts.pop()
                parts.append(f"({left} {node.op} {right})")
            else:
                parts.append(format_number(node.value))
        return parts.pop()


@dataclass(frozen=True, slots=True)
class Number(Expression):
    value: float


@dataclass(frozen=True, slots=True)
class BinaryOp(Expression):
    left: Expression
    op: Op
    right: Expression
