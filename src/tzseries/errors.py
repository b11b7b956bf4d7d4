from __future__ import annotations


class DateRangeError(ValueError):
    """Base class for date range validation failures."""


class InvalidDateError(DateRangeError):
    def __init__(self, bound: str, value: object = None) -> None:
        self.bound = bound
        self.value = value
        super().__init__(f"{bound} date is not a valid instant: {value!r}")


class InvalidRangeError(DateRangeError):
    def __init__(self, message: str = "end date earlier than start date") -> None:
        super().__init__(message)


class RangeTooLargeError(DateRangeError):
    def __init__(self, max_range_days: int, actual_days: int) -> None:
        self.max_range_days = max_range_days
        self.actual_days = actual_days
        super().__init__(
            f"date range cannot exceed {max_range_days} days, got {actual_days} days"
        )


class InvalidTimezoneError(DateRangeError):
    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(f"unknown timezone: {name!r}")
