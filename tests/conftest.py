"""Shared helpers for the runningdinner tests."""

import pytest

from runningdinner.models import UNDEFINED_SEATS, CourseClass, Gender, Participant, Team


@pytest.fixture
def make_participants():
    """Return a factory creating participants numbered 1..count."""

    def factory(
        count: int,
        num_seats: int = UNDEFINED_SEATS,
        gender: Gender = Gender.UNDEFINED,
        start: int = 1,
    ) -> list[Participant]:
        return [
            Participant(
                participant_number=n,
                name=f"Participant {n}",
                gender=gender,
                num_seats=num_seats,
            )
            for n in range(start, start + count)
        ]

    return factory


@pytest.fixture
def make_teams():
    """
    Return a factory creating teams_per_course teams for every course class.

    Teams are numbered consecutively, the first block cooks the first course.
    """

    def factory(course_classes: list[CourseClass], teams_per_course: int) -> list[Team]:
        teams = []
        for course_class in course_classes:
            for _ in range(teams_per_course):
                number = len(teams) + 1
                teams.append(
                    Team(
                        team_number=number,
                        members=[Participant(participant_number=number)],
                        course_class=course_class,
                    )
                )
        return teams

    return factory
