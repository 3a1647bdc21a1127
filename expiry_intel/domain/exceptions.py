"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidCalendarDate(DomainException):
    """Year/month/day components do not form a real calendar date"""

    def __init__(self, year: int, month: int, day: int):
        self.year = year
        self.month = month
        self.day = day
        super().__init__(f"Not a valid calendar date: {year:04d}-{month:02d}-{day:02d}")


class InvalidThresholdsError(DomainException):
    """Threshold pair violates 1 <= expiring_days < warning_days"""

    pass
