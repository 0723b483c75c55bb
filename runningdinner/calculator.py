"""
Entry points for calculating a running dinner.

The three steps are run in order by the caller:

1. form_teams: split participants into teams, excluding those that cannot
   be placed into a complete rotation.
2. assign_courses: give each team the course it cooks.
3. build_schedule: compute who visits whom.
"""

import logging
from collections.abc import Sequence

import numpy as np

from runningdinner.combination import plan_combination
from runningdinner.config import DinnerConfig
from runningdinner.distributor import TeamDistributor
from runningdinner.errors import InsufficientParticipantsError, NoPossibleRunningDinnerError
from runningdinner.formation import build_teams
from runningdinner.meals import assign_course_classes, shuffled
from runningdinner.models import (
    CombinationInfo,
    CourseClass,
    GeneratedTeamsResult,
    Participant,
    Team,
)
from runningdinner.routes import build_routes

logger = logging.getLogger(__name__)


def form_teams(
    participants: list[Participant],
    config: DinnerConfig,
    rng: np.random.Generator | None = None,
) -> GeneratedTeamsResult:
    """
    Build the teams of a dinner.

    Participants that do not fit into complete rotation segments are taken
    from the end of the passed list and reported as not assigned.
    Raises InsufficientParticipantsError if no dinner is possible at all.
    """
    if rng is None:
        rng = config.create_rng()

    team_size = config.team_size
    if team_size >= len(participants):
        raise InsufficientParticipantsError(
            f"There must be more participants ({len(participants)}) than a team's size ({team_size})"
        )

    combination_info = _combination_info(participants, config)
    num_not_assignable = _count_not_assignable(participants, combination_info, config)
    split_index = len(participants) - num_not_assignable
    to_assign = list(participants[:split_index])
    not_assigned = list(participants[split_index:])

    if not_assigned:
        logger.warning(
            "%d of %d participants cannot be assigned to a team", len(not_assigned), len(participants)
        )

    to_assign = shuffled(to_assign, rng)
    distributor = TeamDistributor(to_assign)
    category_one, category_two = distributor.distribute(config)
    teams = build_teams(to_assign, config, category_one, category_two)

    return GeneratedTeamsResult(
        regular_teams=teams,
        not_assigned_participants=not_assigned,
        combination_info=combination_info,
    )


def not_assignable_participants(
    participants: list[Participant],
    config: DinnerConfig,
) -> list[Participant]:
    """
    Return the participants form_teams would leave out.

    If no dinner is possible at all, every participant is returned.
    """
    try:
        combination_info = _combination_info(participants, config)
    except NoPossibleRunningDinnerError:
        return list(participants)
    num_not_assignable = _count_not_assignable(participants, combination_info, config)
    return list(participants[len(participants) - num_not_assignable :])


def assign_courses(
    teams: list[Team],
    course_classes: Sequence[CourseClass],
    rng: np.random.Generator | None = None,
) -> list[Team]:
    """
    Randomly assign one course class per team, equally many teams per class.

    Pass a seeded rng (e.g. DinnerConfig.create_rng()) for reproducible results.
    """
    if rng is None:
        rng = np.random.default_rng()
    return assign_course_classes(teams, course_classes, rng)


def build_schedule(
    teams: list[Team],
    combination_info: CombinationInfo,
    config: DinnerConfig,
) -> list[Team]:
    """Populate the visitation plans of all teams (in place)."""
    graph = build_routes(teams, combination_info, config.course_classes)
    logger.info("Built routes for %d teams (%d visits)", len(teams), len(graph.edges))
    return teams


def _combination_info(participants: list[Participant], config: DinnerConfig) -> CombinationInfo:
    num_teams = len(participants) // config.team_size
    return plan_combination(num_teams, config.num_course_classes)


def _count_not_assignable(
    participants: list[Participant],
    combination_info: CombinationInfo,
    config: DinnerConfig,
) -> int:
    # Participants of teams outside any segment plus those not filling a whole team
    return (
        combination_info.num_remaining_teams * config.team_size
        + len(participants) % config.team_size
    )
