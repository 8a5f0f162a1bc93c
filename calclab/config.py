"""Настройки парсера."""
from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ParserSettings:
    """
    allow_trailing_input: разрешить хвост после корректного выражения
        (разбирается только префикс, остаток игнорируется)
    max_depth: предельная вложенность скобок
    """

    allow_trailing_input: bool = False
    max_depth: int = 100


DEFAULT_SETTINGS = ParserSettings()
