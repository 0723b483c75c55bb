"""Balanced distribution of participants into two pairing queues."""

import logging
from collections import deque

from runningdinner.config import DinnerConfig
from runningdinner.models import Gender, GenderAspect, Participant

logger = logging.getLogger(__name__)


def toggle_hosting(can_host: bool | None, force_distribution: bool) -> bool | None:
    """Return the hosting capability a partner should have (None = don't care)."""
    if can_host is None or not force_distribution:
        return None
    return not can_host


def toggle_gender(gender: Gender, gender_aspect: GenderAspect) -> Gender:
    """Return the gender a partner should have (UNDEFINED = don't care)."""
    if gender == Gender.UNDEFINED or gender_aspect == GenderAspect.IGNORE:
        return Gender.UNDEFINED
    if gender_aspect == GenderAspect.FORCE_MIXED:
        return Gender.FEMALE if gender == Gender.MALE else Gender.MALE
    return gender


def distribute_equally(left: deque, items, right: deque) -> None:
    """Append every item to whichever of left/right is currently shorter."""
    for item in items:
        if len(left) <= len(right):
            left.append(item)
        else:
            right.append(item)


class TeamDistributor:
    """
    Splits participants into two queues so that pairing the i-th element of
    the first queue with the i-th element of the second one tends to satisfy
    the capacity and gender policy of the dinner.
    """

    def __init__(self, participants: list[Participant]):
        self.participants = list(participants)
        self.category_one: deque[Participant] = deque()
        self.category_two: deque[Participant] = deque()
        self._placed: set[Participant] = set()

    def distribute(self, config: DinnerConfig) -> tuple[deque[Participant], deque[Participant]]:
        if not config.has_distribution_policy:
            distribute_equally(self.category_one, self.participants, self.category_two)
            return self.category_one, self.category_two

        self._placed.clear()
        unmatched: list[Participant] = []

        for participant in self.participants:
            if participant in self._placed:
                continue
            self._placed.add(participant)

            wanted_hosting = toggle_hosting(
                config.can_host(participant), config.force_equal_distributed_capacity
            )
            wanted_gender = toggle_gender(participant.gender, config.gender_aspect)

            partner = self._find_matching_participant(config, wanted_hosting, wanted_gender)
            if partner is None:
                partner = self._next_unplaced()

            if partner is None:
                unmatched.append(participant)
                continue

            self._placed.add(partner)
            self.category_one.append(participant)
            self.category_two.append(partner)

        # Leftovers without a partner go to the shorter queue
        distribute_equally(self.category_one, unmatched, self.category_two)

        logger.debug(
            "Distributed %d participants into queues of %d and %d",
            len(self.participants),
            len(self.category_one),
            len(self.category_two),
        )
        return self.category_one, self.category_two

    def _next_unplaced(self) -> Participant | None:
        return next((p for p in self.participants if p not in self._placed), None)

    def _find_matching_participant(
        self,
        config: DinnerConfig,
        wanted_hosting: bool | None,
        wanted_gender: Gender,
    ) -> Participant | None:
        """
        Find the first unplaced participant matching the wanted profile.

        Falls back to a participant matching only the hosting capability,
        then to one matching only the gender.
        """
        hosting_fallback = None
        gender_fallback = None

        for candidate in self.participants:
            if candidate in self._placed:
                continue

            can_host = config.can_host(candidate)
            hosting_matches = wanted_hosting is None or can_host == wanted_hosting
            gender_matches = wanted_gender == Gender.UNDEFINED or candidate.gender == wanted_gender

            if hosting_matches and gender_matches:
                return candidate

            if hosting_fallback is None and wanted_hosting is not None and can_host == wanted_hosting:
                hosting_fallback = candidate
            elif (
                gender_fallback is None
                and wanted_gender != Gender.UNDEFINED
                and candidate.gender == wanted_gender
            ):
                gender_fallback = candidate

        return hosting_fallback or gender_fallback
