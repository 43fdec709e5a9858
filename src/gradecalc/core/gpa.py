import logging
import math
import re
from typing import Iterable, Optional, Protocol, Union

from gradecalc.core.grades import to_grade_point


logger = logging.getLogger(__name__)

Number = Union[int, float]

# Leading decimal literal, read the way a browser's parseFloat reads it.
_LEADING_NUMBER = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class CourseLike(Protocol):
    credits: Number
    grade: str


def parse_number(text: str) -> float:
    """
    Parse a free-text numeric input, returning NaN when it does not start with a number.
    Trailing text after the number is ignored, so "7abc" reads as 7.
    """
    match = _LEADING_NUMBER.match(text.lstrip()) if isinstance(text, str) else None
    if match is None:
        return math.nan
    return float(match.group().replace("Infinity", "inf"))


def parse_credits(text: str) -> Number:
    """
    Parse the credits field of a course row.
    Empty text counts as 0; integral values come back as int.
    """
    cleaned = text.strip() if text else ""
    if not cleaned:
        return 0
    value = float(cleaned)
    if not math.isfinite(value):
        raise ValueError(f"Credits must be a finite number: {text}")
    if value.is_integer():
        return int(value)
    return value


def _counts(credits: Number) -> bool:
    return bool(credits) and not math.isnan(credits)


def _divide(numerator: float, denominator: float) -> float:
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def calculate_spi(courses: Iterable[CourseLike], *, round_to: int = 2) -> Optional[float]:
    """
    SPI = Σ(credits * grade_point) / Σ(credits)
    Courses with zero or NaN credits are skipped; returns None when nothing counts.
    """
    total_points = 0.0
    total_credits = 0

    for course in courses:
        if _counts(course.credits) and course.grade:
            total_credits += course.credits
            total_points += course.credits * to_grade_point(course.grade)

    if total_credits == 0:
        return None

    return round(total_points / total_credits, round_to)


def calculate_cpi(
    spi: Optional[float],
    current_cpi: str,
    total_credits: str,
    courses: Iterable[CourseLike],
    *,
    round_to: int = 2,
) -> Optional[float]:
    """
    Blend the previous CPI with this semester:
    CPI = (cpi * prior_credits + spi * semester_credits) / (prior_credits + semester_credits)
    Returns None unless spi and both text inputs are present.
    """
    if spi is None or current_cpi == "" or total_credits == "":
        return None

    cpi_value = parse_number(current_cpi)
    prior_credits = parse_number(total_credits)
    semester_credits = sum(course.credits for course in courses)

    new_cpi = _divide(
        cpi_value * prior_credits + spi * semester_credits,
        prior_credits + semester_credits,
    )
    result = round(new_cpi, round_to)

    if not math.isfinite(result):
        logger.warning(
            "CPI projection is not finite (current_cpi=%r, total_credits=%r, semester_credits=%s)",
            current_cpi,
            total_credits,
            semester_credits,
        )
    return result
