from types import MappingProxyType
from typing import Mapping, Tuple


GRADE_POINTS: Mapping[str, int] = MappingProxyType(
    {
        "AP": 10,
        "AA": 10,
        "AB": 9,
        "BB": 8,
        "BC": 7,
        "CC": 6,
        "CD": 5,
        "DD": 4,
        "FR": 0,
    }
)

GRADE_SYMBOLS: Tuple[str, ...] = tuple(GRADE_POINTS)

DEFAULT_GRADE = "BC"
DEFAULT_CREDITS = 6


def is_grade_symbol(symbol: object) -> bool:
    return isinstance(symbol, str) and symbol in GRADE_POINTS


def to_grade_point(symbol: str) -> int:
    try:
        return GRADE_POINTS[symbol]
    except KeyError as exc:
        raise ValueError(f"Unsupported letter grade: {symbol}") from exc
