"""Tests for assigning course classes to teams."""

from collections import Counter

import numpy as np
import pytest

from runningdinner.calculator import assign_courses
from runningdinner.errors import SizeMismatchError
from runningdinner.meals import assign_course_classes, shuffled
from runningdinner.models import DEFAULT_COURSE_CLASSES, Team


def _teams(count: int) -> list[Team]:
    return [Team(team_number=n) for n in range(1, count + 1)]


def test_every_course_gets_the_same_number_of_teams() -> None:
    teams = _teams(9)

    assign_course_classes(teams, DEFAULT_COURSE_CLASSES, np.random.default_rng(1))

    counts = Counter(t.course_class for t in teams)
    assert dict(counts) == {c: 3 for c in DEFAULT_COURSE_CLASSES}


def test_teams_stay_sorted_by_number() -> None:
    teams = _teams(6)

    result = assign_course_classes(teams, DEFAULT_COURSE_CLASSES, np.random.default_rng(3))

    assert result is teams
    assert [t.team_number for t in teams] == [1, 2, 3, 4, 5, 6]


def test_team_count_must_be_multiple_of_course_count() -> None:
    with pytest.raises(SizeMismatchError):
        assign_course_classes(_teams(7), DEFAULT_COURSE_CLASSES, np.random.default_rng())


def test_no_course_classes_raise() -> None:
    with pytest.raises(SizeMismatchError):
        assign_course_classes(_teams(3), (), np.random.default_rng())


def test_same_seed_gives_same_assignment() -> None:
    teams = _teams(18)

    assign_courses(teams, DEFAULT_COURSE_CLASSES, rng=np.random.default_rng(42))
    first = [t.course_class for t in teams]
    assign_courses(teams, DEFAULT_COURSE_CLASSES, rng=np.random.default_rng(42))
    second = [t.course_class for t in teams]

    assert first == second


def test_shuffled_keeps_all_items() -> None:
    items = list(range(20))

    result = shuffled(items, np.random.default_rng(5))

    assert sorted(result) == items
    assert items == list(range(20))


def test_assign_courses_without_rng_balances_courses() -> None:
    teams = _teams(6)

    assign_courses(teams, DEFAULT_COURSE_CLASSES)

    counts = Counter(t.course_class for t in teams)
    assert dict(counts) == {c: 2 for c in DEFAULT_COURSE_CLASSES}
