"""Random, evenly balanced assignment of course classes to teams."""

import logging
from collections.abc import Sequence

import numpy as np

from runningdinner.errors import SizeMismatchError
from runningdinner.models import CourseClass, Team

logger = logging.getLogger(__name__)


def shuffled(items: Sequence, rng: np.random.Generator) -> list:
    """Return a new list with the items in random order."""
    return [items[i] for i in rng.permutation(len(items))]


def assign_course_classes(
    teams: list[Team],
    course_classes: Sequence[CourseClass],
    rng: np.random.Generator,
) -> list[Team]:
    """
    Give every team one course class, len(teams) / K teams per class.

    The passed list is shuffled, split into K contiguous blocks in course
    class order and finally sorted by team number again (in place).
    """
    num_teams = len(teams)
    num_course_classes = len(course_classes)

    if num_course_classes == 0:
        raise SizeMismatchError("Need at least one course class for assigning courses to teams")
    if num_teams % num_course_classes != 0:
        raise SizeMismatchError(
            f"Number of teams ({num_teams}) doesn't match expected size "
            f"({num_course_classes} x N)"
        )

    block_size = num_teams // num_course_classes
    randomized = shuffled(teams, rng)

    for index, course_class in enumerate(course_classes):
        for team in randomized[index * block_size : (index + 1) * block_size]:
            team.course_class = course_class

    teams.sort(key=lambda t: t.team_number)
    logger.info("Assigned %d course classes to %d teams each", num_course_classes, block_size)
    return teams
