import itertools
import logging
import math
from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Optional, Union

from gradecalc.core.gpa import calculate_cpi, calculate_spi
from gradecalc.core.grades import DEFAULT_CREDITS, DEFAULT_GRADE, is_grade_symbol


logger = logging.getLogger(__name__)

COURSE_FIELDS = ("name", "credits", "grade")

Listener = Callable[["CalculatorState"], None]


class CourseUpdateError(ValueError):
    pass


@dataclass
class Course:
    id: int
    name: str = ""
    credits: Union[int, float] = DEFAULT_CREDITS
    grade: str = DEFAULT_GRADE


def _check_value(field_name: str, value: object) -> None:
    if field_name not in COURSE_FIELDS:
        raise CourseUpdateError(f"Unknown course field: {field_name}")
    if field_name == "name" and not isinstance(value, str):
        raise CourseUpdateError("Course name must be text")
    if field_name == "credits" and (isinstance(value, bool) or not isinstance(value, (int, float))):
        raise CourseUpdateError("Course credits must be a number")
    if field_name == "credits" and not math.isfinite(value):
        raise CourseUpdateError("Course credits must be finite")
    if field_name == "grade" and not is_grade_symbol(value):
        raise CourseUpdateError(f"Unsupported letter grade: {value}")


@dataclass
class CalculatorState:
    courses: List[Course] = field(default_factory=list)
    spi: Optional[float] = None
    current_cpi: str = ""
    total_credits: str = ""
    new_cpi: Optional[float] = None

    _ids: Iterator[int] = field(default_factory=lambda: itertools.count(1), init=False, repr=False)
    _listeners: List[Listener] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        self.spi = calculate_spi(self.courses)
        if self.courses:
            # Keep new ids clear of any records handed in at construction.
            self._ids = itertools.count(max(course.id for course in self.courses) + 1)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a callback run after every change; returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def get_course(self, course_id: int) -> Optional[Course]:
        for course in self.courses:
            if course.id == course_id:
                return course
        return None

    def add_course(self) -> Course:
        course = Course(id=next(self._ids))
        self.courses.append(course)
        logger.debug("Added course %s", course.id)
        self._courses_changed()
        return course

    def remove_course(self, course_id: int) -> None:
        before = len(self.courses)
        self.courses = [course for course in self.courses if course.id != course_id]
        if len(self.courses) != before:
            logger.debug("Removed course %s", course_id)
        self._courses_changed()

    def update_course(self, course_id: int, field_name: str, value: object) -> None:
        course = self.get_course(course_id)
        if course is not None:
            _check_value(field_name, value)
            setattr(course, field_name, value)
            logger.debug("Course %s: %s=%r", course_id, field_name, value)
        self._courses_changed()

    def set_current_cpi(self, text: str) -> None:
        self.current_cpi = text
        self._notify()

    def set_total_credits(self, text: str) -> None:
        self.total_credits = text
        self._notify()

    def calculate_cpi(self) -> Optional[float]:
        self.new_cpi = calculate_cpi(self.spi, self.current_cpi, self.total_credits, self.courses)
        if self.new_cpi is None:
            logger.info("CPI projection cleared (missing SPI or CPI inputs)")
        else:
            logger.info("Projected CPI %s from SPI %s", self.new_cpi, self.spi)
        self._notify()
        return self.new_cpi

    def _courses_changed(self) -> None:
        self.spi = calculate_spi(self.courses)
        logger.debug("SPI recalculated: %s", self.spi)
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)
