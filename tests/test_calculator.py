"""
Tests for the full calculation of a running dinner.

Covers forming teams, assigning courses and building the schedule.
"""

from collections import Counter

import pytest

from runningdinner.calculator import (
    assign_courses,
    build_schedule,
    form_teams,
    not_assignable_participants,
)
from runningdinner.config import DinnerConfig
from runningdinner.errors import (
    IncompleteRouteError,
    InsufficientCourseDiversityError,
    InsufficientParticipantsError,
)
from runningdinner.models import APPETIZER, DEFAULT_COURSE_CLASSES, CourseClass, Gender, GenderAspect
from runningdinner.validator import validate_schedule

TWO_COURSES = (CourseClass("Main course"), CourseClass("Dessert"))


def _run_dinner(participants, config):
    result = form_teams(participants, config)
    assign_courses(result.regular_teams, config.course_classes, rng=config.create_rng())
    build_schedule(result.regular_teams, result.combination_info, config)
    return result


def test_eighteen_participants_make_a_valid_dinner(make_participants) -> None:
    config = DinnerConfig(seed=1)

    result = _run_dinner(make_participants(18), config)

    teams = result.regular_teams
    assert len(teams) == 9
    assert not result.has_not_assigned_participants
    assert all(len(t.members) == 2 for t in teams)
    assert set(Counter(t.course_class for t in teams).values()) == {3}
    for team in teams:
        plan = team.visitation_plan
        assert plan.num_hosts == 2
        assert plan.num_guests == 2
        courses = {t.course_class for t in plan.host_teams | plan.guest_teams}
        assert team.course_class not in courses
        assert len(courses) == 2

    report = validate_schedule(teams, config.num_course_classes)
    assert report.all_passed, str(report)


def test_participants_not_filling_a_team_are_left_out(make_participants) -> None:
    participants = make_participants(19)

    result = form_teams(participants, DinnerConfig(seed=3))

    assert len(result.regular_teams) == 9
    assert [p.participant_number for p in result.not_assigned_participants] == [19]


def test_teams_outside_segments_are_left_out(make_participants) -> None:
    participants = make_participants(20)

    result = form_teams(participants, DinnerConfig(seed=3))

    assert len(result.regular_teams) == 9
    assert [p.participant_number for p in result.not_assigned_participants] == [19, 20]
    assert result.combination_info.num_remaining_teams == 1


def test_two_courses_with_thirteen_participants(make_participants) -> None:
    config = DinnerConfig(course_classes=TWO_COURSES, seed=5)

    result = _run_dinner(make_participants(13), config)

    assert len(result.regular_teams) == 6
    assert [p.participant_number for p in result.not_assigned_participants] == [13]
    assert validate_schedule(result.regular_teams, 2).all_passed


@pytest.mark.parametrize(
    ("num_participants", "course_classes", "num_teams"),
    [
        (66, DEFAULT_COURSE_CLASSES, 33),
        (150, DEFAULT_COURSE_CLASSES, 75),
        (20, TWO_COURSES, 10),
        (32, (CourseClass("Soup"), APPETIZER, CourseClass("Main"), CourseClass("Dessert")), 16),
    ],
)
def test_larger_dinners_are_valid(make_participants, num_participants, course_classes, num_teams) -> None:
    config = DinnerConfig(course_classes=course_classes, seed=11)

    result = _run_dinner(make_participants(num_participants), config)

    assert len(result.regular_teams) == num_teams
    assert not result.has_not_assigned_participants
    report = validate_schedule(result.regular_teams, config.num_course_classes)
    assert report.all_passed, str(report)


def test_participants_assigned_exactly_once(make_participants) -> None:
    result = form_teams(make_participants(27), DinnerConfig(team_size=3, seed=2))

    members = [m.participant_number for t in result.regular_teams for m in t.members]
    assert sorted(members) == list(range(1, 28))
    assert [t.team_number for t in result.regular_teams] == list(range(1, 10))


def test_five_participants_are_too_few_for_two_courses(make_participants) -> None:
    config = DinnerConfig(course_classes=TWO_COURSES)

    with pytest.raises(InsufficientParticipantsError):
        form_teams(make_participants(5), config)

    assert len(not_assignable_participants(make_participants(5), config)) == 5


def test_team_size_not_below_participant_count_raises(make_participants) -> None:
    with pytest.raises(InsufficientParticipantsError):
        form_teams(make_participants(2), DinnerConfig())


def test_not_assignable_participants(make_participants) -> None:
    participants = make_participants(19)

    left_out = not_assignable_participants(participants, DinnerConfig())

    assert [p.participant_number for p in left_out] == [19]
    assert not_assignable_participants(make_participants(18), DinnerConfig()) == []


def test_capacity_is_spread_over_teams(make_participants) -> None:
    participants = make_participants(9, num_seats=6) + make_participants(9, num_seats=2, start=10)
    config = DinnerConfig(seed=4)

    result = form_teams(participants, config)

    for team in result.regular_teams:
        assert sum(config.can_host(m) for m in team.members) == 1
        assert config.can_host(team.host)


def test_force_mixed_teams(make_participants) -> None:
    participants = make_participants(9, gender=Gender.MALE) + make_participants(
        9, gender=Gender.FEMALE, start=10
    )
    config = DinnerConfig(gender_aspect=GenderAspect.FORCE_MIXED, seed=8)

    result = form_teams(participants, config)

    for team in result.regular_teams:
        assert {m.gender for m in team.members} == {Gender.MALE, Gender.FEMALE}


def test_same_seed_forms_same_teams(make_participants) -> None:
    first = form_teams(make_participants(18), DinnerConfig(seed=7))
    second = form_teams(make_participants(18), DinnerConfig(seed=7))

    def members(result):
        return [[m.participant_number for m in t.members] for t in result.regular_teams]

    assert members(first) == members(second)


def test_schedule_needs_two_courses(make_participants) -> None:
    config = DinnerConfig(course_classes=(APPETIZER,))
    result = form_teams(make_participants(18), DinnerConfig(seed=1))
    for team in result.regular_teams:
        team.course_class = APPETIZER

    with pytest.raises(InsufficientCourseDiversityError):
        build_schedule(result.regular_teams, result.combination_info, config)


def test_five_courses_fail_instead_of_returning_partial_routes(make_participants) -> None:
    courses = tuple(CourseClass(label) for label in ("Soup", "Starter", "Main", "Cheese", "Dessert"))
    config = DinnerConfig(course_classes=courses, seed=6)

    with pytest.raises(IncompleteRouteError):
        _run_dinner(make_participants(50), config)
