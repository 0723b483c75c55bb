"""Exceptions raised by runningdinner."""


class NoPossibleRunningDinnerError(Exception):
    """The configuration makes a valid dinner impossible."""


class InsufficientParticipantsError(NoPossibleRunningDinnerError):
    """Too few participants for at least one complete rotation segment."""


class SizeMismatchError(NoPossibleRunningDinnerError):
    """Number of teams does not fit the number of course classes."""


class InsufficientCourseDiversityError(NoPossibleRunningDinnerError):
    """A rotation needs at least two course classes."""


class ScheduleInvariantError(RuntimeError):
    """Internal inconsistency while building teams or routes."""


class IncompleteRouteError(ScheduleInvariantError):
    """The route search could not give every team its required references."""

    def __init__(self, message: str, incomplete_teams: list | None = None):
        super().__init__(message)
        self.incomplete_teams = incomplete_teams or []


class RepeatedMeetingError(ScheduleInvariantError):
    """The route search let two teams sit at the same table more than once."""

    def __init__(self, message: str, meetings: dict | None = None):
        super().__init__(message)
        self.meetings = meetings or {}
