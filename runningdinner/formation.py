"""Building fixed-size teams out of the two distribution queues."""

import logging
from collections import deque

from runningdinner.config import DinnerConfig
from runningdinner.errors import ScheduleInvariantError
from runningdinner.models import Participant, Team

logger = logging.getLogger(__name__)


def build_teams(
    participants: list[Participant],
    config: DinnerConfig,
    category_one: deque[Participant],
    category_two: deque[Participant],
) -> list[Team]:
    """
    Build teams by polling members alternately from both queues.

    participants must already be stripped down to a multiple of the team size.
    Team numbers are assigned in formation order, starting at 1.
    """
    team_size = config.team_size
    if len(participants) % team_size != 0:
        raise ScheduleInvariantError(
            f"{len(participants)} participants cannot be split into teams of {team_size}"
        )
    num_teams = len(participants) // team_size
    teams: list[Team] = []

    for i in range(num_teams):
        members = _poll_members(team_size, category_one, category_two, team_number=i + 1)
        team = Team(team_number=i + 1, members=members)
        select_host(team, config)
        teams.append(team)

    left_over = len(category_one) + len(category_two)
    if left_over:
        raise ScheduleInvariantError(
            f"Expected {num_teams} teams to consume all participants, but {left_over} are left over"
        )

    logger.info("Built %d teams of %d members", len(teams), team_size)
    return teams


def _poll_members(
    team_size: int,
    category_one: deque[Participant],
    category_two: deque[Participant],
    team_number: int,
) -> list[Participant]:
    queues = (category_one, category_two)
    turn = 0
    members: list[Participant] = []

    for _ in range(team_size):
        queue = queues[turn]
        if not queue:
            queue = queues[1 - turn]
        if not queue:
            raise ScheduleInvariantError(
                f"Both distribution queues are empty while building team {team_number} "
                f"({len(members)} of {team_size} members collected)"
            )
        members.append(queue.popleft())
        turn = 1 - turn

    return members


def select_host(team: Team, config: DinnerConfig) -> Participant:
    """Mark exactly one member of the team as host and return it."""
    for member in team.members:
        member.host = False

    host = next((m for m in team.members if config.can_host(m) is True), None)
    if host is None:
        host = next((m for m in team.members if config.can_host(m) is None), None)
    if host is None:
        host = team.members[0]

    host.host = True
    return host
