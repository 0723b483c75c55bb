"""Tests for splitting teams into rotation segments."""

import pytest

from runningdinner.combination import factorize_teams, plan_combination, segment_size_candidates
from runningdinner.errors import InsufficientParticipantsError, SizeMismatchError


@pytest.mark.parametrize(
    ("num_teams", "num_course_classes", "expected", "remainder"),
    [
        (9, 3, {9: 1, 12: 0, 15: 0}, 0),
        (18, 3, {9: 2, 12: 0, 15: 0}, 0),
        (15, 3, {9: 0, 12: 0, 15: 1}, 0),
        (21, 3, {9: 1, 12: 1, 15: 0}, 0),
        (33, 3, {9: 2, 12: 0, 15: 1}, 0),
        (75, 3, {9: 7, 12: 1, 15: 0}, 0),
        (10, 3, {9: 1, 12: 0, 15: 0}, 1),
        (4, 2, {4: 1, 6: 0}, 0),
        (6, 2, {4: 0, 6: 1}, 0),
        (9, 2, {4: 2, 6: 0}, 1),
        (16, 4, {16: 1}, 0),
    ],
)
def test_segment_factorization(num_teams, num_course_classes, expected, remainder) -> None:
    info = plan_combination(num_teams, num_course_classes)

    assert info.segment_factorization == expected
    assert info.num_remaining_teams == remainder
    assert info.team_segment_size == num_course_classes * num_course_classes


@pytest.mark.parametrize("num_course_classes", [2, 3, 4])
def test_remainder_never_exceeds_plain_segments(num_course_classes) -> None:
    segment_size = num_course_classes * num_course_classes
    for num_teams in range(segment_size, 80):
        info = plan_combination(num_teams, num_course_classes)
        assert info.num_remaining_teams <= num_teams % segment_size
        assert sum(info.segment_sizes()) + info.num_remaining_teams == num_teams


def test_segment_sizes_are_ordered() -> None:
    info = plan_combination(33, 3)

    assert info.segment_sizes() == [9, 9, 15]
    assert info.num_assignable_teams == 33


def test_too_few_teams_raise() -> None:
    with pytest.raises(InsufficientParticipantsError):
        plan_combination(8, 3)
    with pytest.raises(InsufficientParticipantsError):
        plan_combination(2, 2)


def test_no_course_classes_raise() -> None:
    with pytest.raises(SizeMismatchError):
        plan_combination(10, 0)


def test_unknown_course_counts_use_square_segments() -> None:
    assert segment_size_candidates(5) == (25,)

    info = plan_combination(52, 5)
    assert info.segment_factorization == {25: 2}
    assert info.num_remaining_teams == 2


def test_factorize_prefers_smaller_segments_on_ties() -> None:
    # 36 = 4 x 9 = 3 x 12 = 9 + 12 + 15
    factorization, remainder = factorize_teams(36, (9, 12, 15))

    assert remainder == 0
    assert factorization == {9: 4, 12: 0, 15: 0}


def test_factorize_without_fitting_segment_keeps_all_teams() -> None:
    factorization, remainder = factorize_teams(3, (4, 6))

    assert factorization == {4: 0, 6: 0}
    assert remainder == 3
