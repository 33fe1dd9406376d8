class DomainError(Exception):
    """Base exception for every failure the timeclock reports to the user."""


class StateViolationError(DomainError):
    """Raised when a clock action does not fit the current clock state."""


class AlreadyClockedInError(StateViolationError):
    """Raised on clock-in while the last action is already a clock-in."""


class AlreadyClockedOutError(StateViolationError):
    """Raised on clock-out while clocked out (including an empty timesheet)."""


class StorageUnavailableError(DomainError):
    """Raised when the timesheet location cannot be resolved or written."""


class TimesheetParseError(DomainError):
    """Raised when a stored timesheet exists but is not a valid timesheet."""


class InvalidTimesheetError(DomainError):
    """Raised when a loaded timesheet breaks the in/out alternation (strict mode)."""
