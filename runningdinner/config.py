"""Dinner configuration for runningdinner."""

from dataclasses import dataclass, field

import numpy as np

from runningdinner.models import (
    DEFAULT_COURSE_CLASSES,
    UNDEFINED_SEATS,
    CourseClass,
    GenderAspect,
    Participant,
)


@dataclass(frozen=True)
class DinnerConfig:
    """Options of one running dinner event."""

    course_classes: tuple[CourseClass, ...] = field(default=DEFAULT_COURSE_CLASSES)
    team_size: int = 2
    gender_aspect: GenderAspect = GenderAspect.IGNORE
    force_equal_distributed_capacity: bool = True
    # Stored for completeness, route building does not look at distances
    consider_shortest_paths: bool = False
    seed: int | None = None

    def __post_init__(self):
        # Accept any iterable of course classes but store a tuple
        object.__setattr__(self, "course_classes", tuple(self.course_classes))
        if self.team_size < 1:
            raise ValueError(f"Team size must be at least 1, got {self.team_size}")
        labels = [c.label for c in self.course_classes]
        if len(set(labels)) != len(labels):
            raise ValueError(f"Course class labels must be unique: {labels}")

    @property
    def num_course_classes(self) -> int:
        return len(self.course_classes)

    @property
    def seats_needed(self) -> int:
        """Seats a host needs to receive its own team and all guest teams."""
        return self.team_size * self.num_course_classes

    @property
    def has_distribution_policy(self) -> bool:
        return self.force_equal_distributed_capacity or self.gender_aspect != GenderAspect.IGNORE

    def can_host(self, participant: Participant) -> bool | None:
        """
        Check whether a participant has enough seats to host.

        Returns None if the participant's number of seats is unknown.
        """
        if participant.num_seats == UNDEFINED_SEATS:
            return None
        return participant.num_seats >= self.seats_needed

    def create_rng(self) -> np.random.Generator:
        return np.random.default_rng(self.seed)
