"""Data models for runningdinner."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

# Seats value for participants whose hosting capacity is not known
UNDEFINED_SEATS = -1
UNDEFINED_AGE = -1


class Gender(Enum):
    """Gender of a participant."""

    MALE = "male"
    FEMALE = "female"
    UNDEFINED = "undefined"


class GenderAspect(Enum):
    """How gender is taken into account when pairing participants into teams."""

    IGNORE = "ignore"
    FORCE_MIXED = "force_mixed"
    FORCE_SAME = "force_same"


@dataclass(eq=False)
class Participant:
    """A participant of the dinner, identified by its participant number."""

    participant_number: int
    name: str = ""
    email: str = ""
    gender: Gender = Gender.UNDEFINED
    num_seats: int = UNDEFINED_SEATS
    age: int = UNDEFINED_AGE
    address: str = ""
    host: bool = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Participant):
            return NotImplemented
        return self.participant_number == other.participant_number

    def __hash__(self) -> int:
        return hash(self.participant_number)

    def __repr__(self) -> str:
        return f"Participant({self.participant_number})"


@dataclass(frozen=True)
class CourseClass:
    """A course of the dinner (e.g. dessert), identified by its label."""

    label: str
    time: str | None = field(default=None, compare=False)

    def __str__(self) -> str:
        return self.label


APPETIZER = CourseClass("Appetizer")
MAIN_COURSE = CourseClass("Main course")
DESSERT = CourseClass("Dessert")
DEFAULT_COURSE_CLASSES = (APPETIZER, MAIN_COURSE, DESSERT)


class VisitationPlan:
    """
    Route of one team: the teams it visits and the teams it receives.

    host_teams are the teams this team visits as a guest, guest_teams are the
    teams visiting this team. Both sides of a reference are only ever written
    together by RouteGraph.add_host_reference.
    """

    def __init__(self, team: Team):
        self.team = team
        self._host_teams: set[Team] = set()
        self._guest_teams: set[Team] = set()

    @property
    def host_teams(self) -> frozenset[Team]:
        return frozenset(self._host_teams)

    @property
    def guest_teams(self) -> frozenset[Team]:
        return frozenset(self._guest_teams)

    @property
    def num_hosts(self) -> int:
        return len(self._host_teams)

    @property
    def num_guests(self) -> int:
        return len(self._guest_teams)

    def contains_reference(self, team: Team) -> bool:
        """Return True if the passed team is a host or a guest of this team."""
        return team in self._host_teams or team in self._guest_teams

    def has_host_with_course(self, course_class: CourseClass) -> bool:
        """Return True if this team visits a team cooking the passed course."""
        return any(t.course_class == course_class for t in self._host_teams)

    def has_guest_with_course(self, course_class: CourseClass) -> bool:
        """Return True if this team receives a team cooking the passed course."""
        return any(t.course_class == course_class for t in self._guest_teams)

    def is_complete(self, num_references: int) -> bool:
        return self.num_hosts == num_references and self.num_guests == num_references

    def __repr__(self) -> str:
        hosts = sorted(t.team_number for t in self._host_teams)
        guests = sorted(t.team_number for t in self._guest_teams)
        return f"VisitationPlan(team={self.team.team_number}, hosts={hosts}, guests={guests})"


@dataclass(eq=False)
class Team:
    """A team of participants cooking one course at the host's place."""

    team_number: int
    members: list[Participant] = field(default_factory=list)
    course_class: CourseClass | None = None
    _visitation_plan: VisitationPlan | None = field(default=None, init=False, repr=False)

    @property
    def visitation_plan(self) -> VisitationPlan:
        if self._visitation_plan is None:
            self._visitation_plan = VisitationPlan(self)
        return self._visitation_plan

    @property
    def host(self) -> Participant | None:
        """The member whose place the team cooks at."""
        return next((m for m in self.members if m.host), None)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Team):
            return NotImplemented
        return self.team_number == other.team_number

    def __hash__(self) -> int:
        return hash(self.team_number)

    def __repr__(self) -> str:
        return f"Team({self.team_number})"


class RouteGraph:
    """Owner of all host/guest references between teams of one dinner."""

    def __init__(self) -> None:
        self.edges: list[tuple[Team, Team]] = []

    def add_host_reference(self, guest: Team, host: Team) -> None:
        """
        Let guest visit host.

        host is added to the host teams of guest and guest to the guest teams
        of host in one step.
        """
        if guest == host:
            raise ValueError(f"{guest} cannot visit itself")
        guest.visitation_plan._host_teams.add(host)
        host.visitation_plan._guest_teams.add(guest)
        self.edges.append((guest, host))


@dataclass
class CombinationInfo:
    """How a number of teams splits into complete rotation segments."""

    num_teams: int
    num_course_classes: int
    team_segment_size: int
    num_remaining_teams: int
    segment_factorization: dict[int, int] = field(default_factory=dict)
    # segment_factorization maps candidate segment size -> number of segments

    @property
    def num_assignable_teams(self) -> int:
        return self.num_teams - self.num_remaining_teams

    def segment_sizes(self) -> list[int]:
        """Expand the factorization into the ordered list of segment sizes."""
        if not self.segment_factorization:
            return [self.team_segment_size] * (self.num_assignable_teams // self.team_segment_size)
        sizes: list[int] = []
        for size, count in sorted(self.segment_factorization.items()):
            sizes.extend([size] * count)
        return sizes


@dataclass
class GeneratedTeamsResult:
    """Result of team formation."""

    regular_teams: list[Team]
    not_assigned_participants: list[Participant]
    combination_info: CombinationInfo

    @property
    def has_not_assigned_participants(self) -> bool:
        return bool(self.not_assigned_participants)
