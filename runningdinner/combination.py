"""Splitting a number of teams into complete rotation segments."""

import logging

from runningdinner.errors import InsufficientParticipantsError, SizeMismatchError
from runningdinner.models import CombinationInfo

logger = logging.getLogger(__name__)

# Segment sizes a dinner with the given number of course classes can be built from
SEGMENT_SIZE_CANDIDATES: dict[int, tuple[int, ...]] = {
    2: (4, 6),
    3: (9, 12, 15),
    4: (16,),
}


def segment_size_candidates(num_course_classes: int) -> tuple[int, ...]:
    default = (num_course_classes * num_course_classes,)
    return SEGMENT_SIZE_CANDIDATES.get(num_course_classes, default)


def plan_combination(num_teams: int, num_course_classes: int) -> CombinationInfo:
    """
    Compute how num_teams teams can be organized into rotation segments.

    Raises InsufficientParticipantsError if not even one segment of
    num_course_classes² teams can be formed.
    """
    if num_course_classes < 1:
        raise SizeMismatchError("A dinner needs at least one course class")

    segment_size = num_course_classes * num_course_classes
    if segment_size > num_teams:
        raise InsufficientParticipantsError(
            f"{num_teams} teams are too few, at least {segment_size} teams are needed "
            f"for {num_course_classes} course classes"
        )

    candidates = segment_size_candidates(num_course_classes)
    # Candidates always contain segment_size, so the remainder is at most num_teams % segment_size
    factorization, remainder = factorize_teams(num_teams, candidates)

    info = CombinationInfo(
        num_teams=num_teams,
        num_course_classes=num_course_classes,
        team_segment_size=segment_size,
        num_remaining_teams=remainder,
        segment_factorization=factorization,
    )
    logger.info(
        "%d teams: segments %s, %d remaining", num_teams, info.segment_sizes(), remainder
    )
    return info


def factorize_teams(num_teams: int, candidates: tuple[int, ...]) -> tuple[dict[int, int], int]:
    """
    Express num_teams as a sum of multiples of the candidate segment sizes.

    The combination with the smallest remainder wins. Among equally good
    combinations the one using most of the smaller sizes is preferred.
    Returns (size -> count for every candidate, remainder).
    """
    sizes = sorted(candidates)
    # No segment at all leaves every team over
    best_counts: tuple[int, ...] = (0,) * len(sizes)
    best_remainder = num_teams

    def search(index: int, remaining: int, counts: tuple[int, ...]) -> None:
        nonlocal best_counts, best_remainder
        size = sizes[index]
        if index == len(sizes) - 1:
            count = remaining // size
            candidate = counts + (count,)
            remainder = remaining - count * size
            # Smaller remainder wins, ties go to the lexicographically larger counts
            if remainder < best_remainder or (
                remainder == best_remainder and candidate > best_counts
            ):
                best_remainder = remainder
                best_counts = candidate
            return
        for count in range(remaining // size, -1, -1):
            search(index + 1, remaining - count * size, counts + (count,))

    search(0, num_teams, ())
    return dict(zip(sizes, best_counts)), best_remainder
