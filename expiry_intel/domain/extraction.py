"""Expiry date extraction from OCR label text"""

import logging
import re
from typing import Callable, Optional, Tuple, Union

from expiry_intel.domain.exceptions import InvalidCalendarDate
from expiry_intel.domain.models import (
    DateCandidate,
    ExtractionMatch,
    NormalizedDate,
    NumericDateOrder,
    PatternFamily,
)
from expiry_intel.utils.date_utils import days_in_month, expand_year

logger = logging.getLogger(__name__)

_FLAGS = re.IGNORECASE | re.ASCII

MONTH_ABBREVIATIONS = {
    "jan": 1, "feb": 2, "mar": 3, "apr": 4,
    "may": 5, "jun": 6, "jul": 7, "aug": 8,
    "sep": 9, "oct": 10, "nov": 11, "dec": 12,
}

# Abbreviation plus any longer spelling ("Sept", "September"), optional trailing dot
_MONTH = r"(" + "|".join(MONTH_ABBREVIATIONS) + r")[a-z]*\.?"

# "EXP: 01/23", "Expires 1/2026", "Exp. Date 12/25" - but not "Expires: 03/15/2025"
LABELED_MONTH_YEAR_RE = re.compile(
    r"\b(?:expiry|expires|exp)\.?(?:\s*date)?[\s:]*"
    r"(\d{1,2})/(\d{4}|\d{2})(?![/\d])",
    _FLAGS,
)

# "Best Before: 15/03/2025", "use by 01/02/25" - always day first
LABELED_EXPLICIT_RE = re.compile(
    r"\b(?:use\s+by|best\s+by|best\s+before)(?:\s*date)?[\s:]*"
    r"(\d{1,2})/(\d{1,2})/(\d{4}|\d{2})(?!\d)",
    _FLAGS,
)

# "Jan 15, 2025"
MONTH_DAY_YEAR_RE = re.compile(rf"\b{_MONTH}\s+(\d{{1,2}}),?\s+(\d{{4}})(?!\d)", _FLAGS)

# "25 Dec 2024"
DAY_MONTH_YEAR_RE = re.compile(rf"(?<!\d)(\d{{1,2}})\s+{_MONTH},?\s+(\d{{4}})(?!\d)", _FLAGS)

# "2025-12-25", "03/04/2025", "15-03-25"
BARE_NUMERIC_RE = re.compile(
    r"(?<!\d)(?:"
    r"(\d{4})[/-](\d{1,2})[/-](\d{1,2})"
    r"|(\d{1,2})[/-](\d{1,2})[/-](\d{4}|\d{2})"
    r")(?!\d)",
    _FLAGS,
)


def match_labeled_month_year(text: str) -> Optional[DateCandidate]:
    match = LABELED_MONTH_YEAR_RE.search(text)
    if not match:
        return None
    return DateCandidate(match.group(0), PatternFamily.LABELED_MONTH_YEAR, match.groups())


def match_labeled_explicit(text: str) -> Optional[DateCandidate]:
    match = LABELED_EXPLICIT_RE.search(text)
    if not match:
        return None
    return DateCandidate(match.group(0), PatternFamily.LABELED_EXPLICIT, match.groups())


def match_month_name(text: str) -> Optional[DateCandidate]:
    """Groups are normalised to (month token, day, year) for both spellings"""
    match = MONTH_DAY_YEAR_RE.search(text)
    if match:
        month, day, year = match.groups()
        return DateCandidate(match.group(0), PatternFamily.MONTH_NAME, (month, day, year))

    match = DAY_MONTH_YEAR_RE.search(text)
    if match:
        day, month, year = match.groups()
        return DateCandidate(match.group(0), PatternFamily.MONTH_NAME, (month, day, year))

    return None


def match_bare_numeric(text: str) -> Optional[DateCandidate]:
    """Groups are kept in textual order; ordering is decided at resolution time"""
    match = BARE_NUMERIC_RE.search(text)
    if not match:
        return None
    groups = tuple(g for g in match.groups() if g is not None)
    return DateCandidate(match.group(0), PatternFamily.BARE_NUMERIC, groups)


Matcher = Callable[[str], Optional[DateCandidate]]

# Priority order: the first family whose first match is a real date wins
PATTERN_MATCHERS: Tuple[Tuple[PatternFamily, Matcher], ...] = (
    (PatternFamily.LABELED_MONTH_YEAR, match_labeled_month_year),
    (PatternFamily.LABELED_EXPLICIT, match_labeled_explicit),
    (PatternFamily.MONTH_NAME, match_month_name),
    (PatternFamily.BARE_NUMERIC, match_bare_numeric),
)


def order_numeric_groups(
    first: int,
    second: int,
    numeric_order: NumericDateOrder = NumericDateOrder.MONTH_FIRST,
) -> Tuple[int, int]:
    """
    Decide which of two leading numeric groups is the month.

    Returns: (month, day)

    - first > 12: must be a day (DD/MM)
    - second > 12: must be a day (MM/DD)
    - both <= 12: genuinely ambiguous, the numeric_order policy decides
    """
    if first > 12:
        return second, first
    if second > 12:
        return first, second
    if numeric_order == NumericDateOrder.DAY_FIRST:
        return second, first
    return first, second


def resolve_candidate(
    candidate: DateCandidate,
    numeric_order: NumericDateOrder = NumericDateOrder.MONTH_FIRST,
) -> NormalizedDate:
    """
    Turn raw captured groups into a calendar-valid date.

    Raises:
        InvalidCalendarDate: Components do not form a real date
    """
    family = candidate.family
    groups = candidate.groups

    if family == PatternFamily.LABELED_MONTH_YEAR:
        month, year = int(groups[0]), expand_year(groups[1])
        if not 1 <= month <= 12:
            raise InvalidCalendarDate(year, month, 0)
        # Good through the end of the stated month
        return NormalizedDate(year, month, days_in_month(year, month))

    if family == PatternFamily.LABELED_EXPLICIT:
        day, month, year = groups
        return NormalizedDate(expand_year(year), int(month), int(day))

    if family == PatternFamily.MONTH_NAME:
        month_token, day, year = groups
        month = MONTH_ABBREVIATIONS[month_token[:3].lower()]
        return NormalizedDate(int(year), month, int(day))

    first, second, third = groups
    if len(first) == 4:
        return NormalizedDate(int(first), int(second), int(third))
    month, day = order_numeric_groups(int(first), int(second), numeric_order)
    return NormalizedDate(expand_year(third), month, day)


def _coerce_text(text: Union[str, bytes, None]) -> str:
    if isinstance(text, (bytes, bytearray)):
        return bytes(text).decode("utf-8", errors="replace")
    if not isinstance(text, str):
        return ""
    return text


def extract_match(
    text: Union[str, bytes, None],
    numeric_order: NumericDateOrder = NumericDateOrder.MONTH_FIRST,
) -> Optional[ExtractionMatch]:
    """
    Find the expiry date in OCR text, with the family and substring that produced it.

    Pattern families are tried in PATTERN_MATCHERS order. Only the first match of
    each family is considered; if it is not a real calendar date the search moves
    on to the next family. The first valid date wins and no later family is consulted.

    Returns None when nothing matches. Never raises for any input.
    """
    text = _coerce_text(text)
    if not text:
        return None

    for family, matcher in PATTERN_MATCHERS:
        candidate = matcher(text)
        if candidate is None:
            continue

        try:
            expiry_date = resolve_candidate(candidate, numeric_order)
        except InvalidCalendarDate as e:
            logger.debug("Discarded %s candidate %r: %s", family.value, candidate.matched_text, e)
            continue

        logger.debug("Extracted %s from %s candidate %r", expiry_date, family.value, candidate.matched_text)
        return ExtractionMatch(
            expiry_date=expiry_date,
            family=family,
            matched_text=candidate.matched_text,
        )

    logger.debug("No expiry date found in %d chars of text", len(text))
    return None


def extract(
    text: Union[str, bytes, None],
    numeric_order: NumericDateOrder = NumericDateOrder.MONTH_FIRST,
) -> Optional[NormalizedDate]:
    """Main entry point: the expiry date in the text, or None if not found"""
    match = extract_match(text, numeric_order)
    return match.expiry_date if match else None
