"""
Schedule validation logic.

These checks verify that the routes of a dinner satisfy the visiting rules:
every team hosts and visits once per other course, nobody visits a team
cooking the same course, and no two teams meet twice. They can be run at test
time or after building any schedule.
"""

from collections import Counter
from dataclasses import dataclass
from functools import partial
from itertools import combinations

from runningdinner.models import Team


@dataclass
class ValidationResult:
    """Outcome of checking one visiting rule."""
    passed: bool
    message: str


@dataclass
class ValidationReport:
    """Outcome of all visiting rules for the routes of one dinner."""
    results: dict[str, ValidationResult]

    @property
    def all_passed(self) -> bool:
        return all(r.passed for r in self.results.values())

    @property
    def violated(self) -> list[str]:
        return [name for name, r in self.results.items() if not r.passed]

    def __str__(self) -> str:
        width = max(len(name) for name in self.results)
        lines = ["=== Route Check ==="]
        for name, result in self.results.items():
            lines.append(f"  {name.ljust(width)}  {'ok' if result.passed else 'VIOLATED'}")
            if not result.passed:
                lines.append(f"    {result.message}")
        if self.all_passed:
            lines.append("All visiting rules are satisfied")
        else:
            lines.append(f"{len(self.violated)} of {len(self.results)} visiting rules violated")
        return "\n".join(lines)


def _result(errors: list[str]) -> ValidationResult:
    return ValidationResult(
        passed=len(errors) == 0,
        message="; ".join(errors[:3]) + (f" (+{len(errors)-3} more)" if len(errors) > 3 else ""),
    )


def crossed_teams(team: Team) -> set[Team]:
    """
    Return every team the passed team meets during the evening.

    These are its own guests, the teams it visits and the other guests
    sitting at the same table at each of those hosts.
    """
    plan = team.visitation_plan
    crossed = set(plan.guest_teams) | set(plan.host_teams)
    for host in plan.host_teams:
        crossed.update(host.visitation_plan.guest_teams)
    crossed.discard(team)
    return crossed


def check_reference_counts(teams: list[Team], num_course_classes: int) -> ValidationResult:
    """Every team hosts K-1 guest teams and visits K-1 host teams."""
    expected = num_course_classes - 1
    errors = []
    for team in teams:
        plan = team.visitation_plan
        if plan.num_hosts != expected or plan.num_guests != expected:
            errors.append(
                f"{team} has {plan.num_hosts} hosts and {plan.num_guests} guests (expected {expected})"
            )
    return _result(errors)


def check_disjoint_hosts_and_guests(teams: list[Team]) -> ValidationResult:
    """No team is both host and guest of the same team."""
    errors = []
    for team in teams:
        plan = team.visitation_plan
        both = plan.host_teams & plan.guest_teams
        if both:
            errors.append(f"{team} both visits and receives {sorted(t.team_number for t in both)}")
    return _result(errors)


def check_no_self_references(teams: list[Team]) -> ValidationResult:
    errors = []
    for team in teams:
        if team.visitation_plan.contains_reference(team):
            errors.append(f"{team} references itself")
    return _result(errors)


def check_no_same_course_references(teams: list[Team]) -> ValidationResult:
    """No team visits or receives a team cooking the same course."""
    errors = []
    for team in teams:
        plan = team.visitation_plan
        for other in plan.host_teams | plan.guest_teams:
            if other.course_class == team.course_class:
                errors.append(f"{team} and {other} both cook {team.course_class}")
    return _result(errors)


def check_no_bidirectional_hosts(teams: list[Team]) -> ValidationResult:
    errors = []
    for team in teams:
        for host in team.visitation_plan.host_teams:
            # Report every pair once
            if team.team_number < host.team_number and team in host.visitation_plan.host_teams:
                errors.append(f"{team} and {host} visit each other")
    return _result(errors)


def check_one_host_per_course(teams: list[Team]) -> ValidationResult:
    """Every team eats each of the other courses at exactly one host."""
    errors = []
    for team in teams:
        courses = Counter(host.course_class for host in team.visitation_plan.host_teams)
        duplicates = [str(c) for c, count in courses.items() if count > 1]
        if duplicates:
            errors.append(f"{team} visits several hosts cooking {duplicates}")
    return _result(errors)


def repeated_meetings(teams: list[Team]) -> dict[tuple[int, int], int]:
    """
    Return the pairs of team numbers sharing a table more than once.

    Every host forms one table with all of its guests.
    """
    meetings: Counter[tuple[int, int]] = Counter()
    for host in teams:
        table = [host, *host.visitation_plan.guest_teams]
        for a, b in combinations(sorted(t.team_number for t in table), 2):
            meetings[(a, b)] += 1
    return {pair: count for pair, count in sorted(meetings.items()) if count > 1}


def check_teams_meet_at_most_once(teams: list[Team]) -> ValidationResult:
    """Any two teams sit at the same table at most once."""
    errors = [f"Teams {a} and {b} meet {count} times" for (a, b), count in repeated_meetings(teams).items()]
    return _result(errors)


def validate_schedule(teams: list[Team], num_course_classes: int) -> ValidationReport:
    """
    Run all validation checks on the routes of the passed teams.

    Returns a ValidationReport with results for each check.
    """
    checks = {
        "reference_counts": partial(check_reference_counts, num_course_classes=num_course_classes),
        "disjoint_hosts_and_guests": check_disjoint_hosts_and_guests,
        "no_self_references": check_no_self_references,
        "no_same_course_references": check_no_same_course_references,
        "no_bidirectional_hosts": check_no_bidirectional_hosts,
        "one_host_per_course": check_one_host_per_course,
        "teams_meet_at_most_once": check_teams_meet_at_most_once,
    }

    results = {name: check(teams) for name, check in checks.items()}
    return ValidationReport(results=results)
