"""Running dinner team formation and route planning."""

from .calculator import assign_courses, build_schedule, form_teams, not_assignable_participants
from .config import DinnerConfig
from .errors import (
    IncompleteRouteError,
    InsufficientCourseDiversityError,
    InsufficientParticipantsError,
    NoPossibleRunningDinnerError,
    RepeatedMeetingError,
    ScheduleInvariantError,
    SizeMismatchError,
)
from .models import (
    CombinationInfo,
    CourseClass,
    Gender,
    GenderAspect,
    GeneratedTeamsResult,
    Participant,
    Team,
    VisitationPlan,
)
from .validator import ValidationReport, ValidationResult, crossed_teams, validate_schedule

__all__ = [
    "Participant",
    "Gender",
    "GenderAspect",
    "CourseClass",
    "Team",
    "VisitationPlan",
    "CombinationInfo",
    "GeneratedTeamsResult",
    "DinnerConfig",
    "form_teams",
    "not_assignable_participants",
    "assign_courses",
    "build_schedule",
    "crossed_teams",
    "validate_schedule",
    "ValidationReport",
    "ValidationResult",
    "NoPossibleRunningDinnerError",
    "InsufficientParticipantsError",
    "SizeMismatchError",
    "InsufficientCourseDiversityError",
    "ScheduleInvariantError",
    "IncompleteRouteError",
    "RepeatedMeetingError",
]
