"""Output formatting for runningdinner."""

import csv
import io
from collections import defaultdict
from collections.abc import Sequence

from runningdinner.models import CourseClass, GeneratedTeamsResult, Team


def _course_order(course_classes: Sequence[CourseClass] | None):
    order = {c: i for i, c in enumerate(course_classes or ())}

    def key(team: Team) -> tuple[int, int]:
        return (order.get(team.course_class, len(order)), team.team_number)

    return key


def _team_label(team: Team) -> str:
    return f"Team {team.team_number}"


def _member_names(team: Team, mark_host: bool = False) -> list[str]:
    names = []
    for member in team.members:
        name = member.name or f"Participant {member.participant_number}"
        if mark_host and member.host:
            name += " (host)"
        names.append(name)
    return names


def format_results(
    result: GeneratedTeamsResult,
    course_classes: Sequence[CourseClass] | None = None,
) -> str:
    """Format the teams, their courses and their routes for display."""
    lines: list[str] = []
    by_course = _course_order(course_classes)
    info = result.combination_info

    if not result.regular_teams:
        lines.append("No teams could be formed.")
    else:
        lines.append("=== Running Dinner Teams ===")
        lines.append(f"Teams: {len(result.regular_teams)}")
        lines.append(f"Segments: {', '.join(str(s) for s in info.segment_sizes())}")
        lines.append("")

        # Group by course, teams without a course are listed last
        by_course_label: dict[str, list[Team]] = defaultdict(list)
        for team in sorted(result.regular_teams, key=by_course):
            label = str(team.course_class) if team.course_class is not None else "No course"
            by_course_label[label].append(team)

        for label, teams in by_course_label.items():
            lines.append(f"--- {label} ---")
            for team in teams:
                host = team.host
                address = f", {host.address}" if host is not None and host.address else ""
                lines.append(f"  {_team_label(team)}{address}:")
                for name in _member_names(team, mark_host=True):
                    lines.append(f"    - {name}")

                plan = team.visitation_plan
                if plan.num_hosts or plan.num_guests:
                    visits = [
                        f"{_team_label(h)} ({h.course_class})"
                        for h in sorted(plan.host_teams, key=by_course)
                    ]
                    guests = [_team_label(g) for g in sorted(plan.guest_teams, key=by_course)]
                    lines.append(f"    Visits: {', '.join(visits)}")
                    lines.append(f"    Guests: {', '.join(guests)}")
            lines.append("")

    if result.has_not_assigned_participants:
        lines.append("=== Not Assigned Participants ===")
        lines.append(
            f"{len(result.not_assigned_participants)} participants could not be placed into a team:"
        )
        for participant in result.not_assigned_participants:
            name = participant.name or f"Participant {participant.participant_number}"
            lines.append(f"  - {name}")
    elif result.regular_teams:
        lines.append("=== All participants assigned ===")

    return "\n".join(lines)


def format_routes_csv(
    teams: list[Team],
    course_classes: Sequence[CourseClass] | None = None,
) -> str:
    """Format every visit of the dinner as CSV for export, one row per guest team and course."""
    out = io.StringIO()
    writer = csv.writer(out, lineterminator="\n")
    writer.writerow(["team", "members", "course", "host_team", "host", "address"])

    by_course = _course_order(course_classes)
    for team in sorted(teams, key=lambda t: t.team_number):
        # A team also eats its own course at home
        stops = sorted([team, *team.visitation_plan.host_teams], key=by_course)
        for stop in stops:
            host = stop.host
            writer.writerow(
                [
                    team.team_number,
                    " & ".join(_member_names(team)),
                    str(stop.course_class) if stop.course_class is not None else "",
                    stop.team_number,
                    host.name if host is not None else "",
                    host.address if host is not None else "",
                ]
            )

    return out.getvalue().rstrip("\n")
