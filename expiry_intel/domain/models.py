"""Domain models - pure Python dataclasses representing expiry entities"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Dict, Tuple

from expiry_intel.domain.exceptions import InvalidCalendarDate
from expiry_intel.utils.date_utils import is_valid_calendar_date

DEFAULT_WARNING_DAYS = 7
DEFAULT_EXPIRING_DAYS = 3


class PatternFamily(str, Enum):
    """Which pattern family produced a date, in extraction priority order"""

    LABELED_MONTH_YEAR = "labeled_month_year"
    LABELED_EXPLICIT = "labeled_explicit"
    MONTH_NAME = "month_name"
    BARE_NUMERIC = "bare_numeric"


class NumericDateOrder(str, Enum):
    """How to read a bare numeric date when both leading groups are <= 12"""

    MONTH_FIRST = "month_first"
    DAY_FIRST = "day_first"


class Category(str, Enum):
    """Urgency category, ordered from most to least urgent"""

    EXPIRED = "expired"
    EXPIRING = "expiring"
    WARNING = "warning"
    FRESH = "fresh"

    @property
    def rank(self) -> int:
        return _CATEGORY_RANK[self]


_CATEGORY_RANK = {
    Category.EXPIRED: 0,
    Category.EXPIRING: 1,
    Category.WARNING: 2,
    Category.FRESH: 3,
}


@dataclass(frozen=True)
class NormalizedDate:
    """A calendar-valid date; construction fails for impossible dates"""

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not is_valid_calendar_date(self.year, self.month, self.day):
            raise InvalidCalendarDate(self.year, self.month, self.day)

    @classmethod
    def from_date(cls, value: date) -> "NormalizedDate":
        return cls(value.year, value.month, value.day)

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def isoformat(self) -> str:
        """Storage form: YYYY-MM-DD, zero-padded"""
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()


@dataclass(frozen=True)
class DateCandidate:
    """Raw groups captured by one pattern family, not yet validated"""

    matched_text: str
    family: PatternFamily
    groups: Tuple[str, ...]


@dataclass(frozen=True)
class ExtractionMatch:
    """Successful extraction with its provenance"""

    expiry_date: NormalizedDate
    family: PatternFamily
    matched_text: str


@dataclass(frozen=True)
class ThresholdConfig:
    """
    Snapshot of the user's expiry thresholds, in days.

    The owning settings store enforces 1 <= expiring_days < warning_days;
    this value object does not, so classification can run on whatever was persisted.
    """

    warning_days: int
    expiring_days: int

    @classmethod
    def default(cls) -> "ThresholdConfig":
        return cls(warning_days=DEFAULT_WARNING_DAYS, expiring_days=DEFAULT_EXPIRING_DAYS)

    @property
    def is_consistent(self) -> bool:
        return 1 <= self.expiring_days < self.warning_days


@dataclass(frozen=True)
class Classification:
    """Category together with the day count it was derived from"""

    category: Category
    days_until_expiry: int


@dataclass(frozen=True)
class CategoryDisplay:
    """Label and colour used by dashboards for a category"""

    label: str
    color: str


@dataclass(frozen=True)
class Reminder:
    """Single scheduled expiry reminder"""

    remind_on: date
    days_before: int


@dataclass
class CategorySummary:
    """Per-category product counts for a dashboard"""

    counts: Dict[Category, int] = field(default_factory=lambda: {c: 0 for c in Category})

    @property
    def total(self) -> int:
        return sum(self.counts.values())
