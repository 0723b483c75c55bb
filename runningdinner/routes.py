"""Building the host/guest routes of all teams, one rotation segment at a time."""

import logging
from collections import deque
from collections.abc import Sequence

from runningdinner.errors import (
    IncompleteRouteError,
    InsufficientCourseDiversityError,
    RepeatedMeetingError,
    ScheduleInvariantError,
)
from runningdinner.models import CombinationInfo, CourseClass, RouteGraph, Team
from runningdinner.templates import Template, get_template
from runningdinner.validator import repeated_meetings

logger = logging.getLogger(__name__)

SegmentMapping = dict[CourseClass, list[Team]]


def build_routes(
    teams: list[Team],
    combination_info: CombinationInfo,
    course_classes: Sequence[CourseClass],
) -> RouteGraph:
    """
    Fill the visitation plan of every team.

    Teams are bucketed by course class (ordered by team number) and consumed
    segment by segment as planned in combination_info. Every segment is
    built from a template if one exists for its size, otherwise by the
    heuristic search.

    Raises IncompleteRouteError if a team is left without all of its hosts
    and guests, and RepeatedMeetingError if two teams would share a table
    more than once.
    """
    num_course_classes = len(course_classes)
    if num_course_classes < 2:
        raise InsufficientCourseDiversityError(
            "There must be at least two course classes for a running dinner"
        )

    queues: dict[CourseClass, deque[Team]] = {c: deque() for c in course_classes}
    for team in sorted(teams, key=lambda t: t.team_number):
        if team.course_class not in queues:
            raise ScheduleInvariantError(
                f"{team} has course class {team.course_class!r}, expected one of "
                f"{[str(c) for c in course_classes]}"
            )
        queues[team.course_class].append(team)

    graph = RouteGraph()
    num_references = num_course_classes - 1

    for segment_number, segment_size in enumerate(combination_info.segment_sizes(), start=1):
        if segment_size % num_course_classes != 0:
            raise ScheduleInvariantError(
                f"Segment size {segment_size} is not a multiple of {num_course_classes}"
            )
        per_course = segment_size // num_course_classes
        segment: SegmentMapping = {}
        for course_class, queue in queues.items():
            if len(queue) < per_course:
                raise ScheduleInvariantError(
                    f"Segment {segment_number} needs {per_course} teams cooking {course_class}, "
                    f"but only {len(queue)} are left"
                )
            segment[course_class] = [queue.popleft() for _ in range(per_course)]

        logger.debug("Building segment %d with %d teams", segment_number, segment_size)
        build_segment(segment, graph)

    left_over = {str(c): len(q) for c, q in queues.items() if q}
    if left_over:
        raise ScheduleInvariantError(
            f"All teams must be consumed when building routes, but there are teams left: {left_over}"
        )

    incomplete = [t for t in teams if not t.visitation_plan.is_complete(num_references)]
    if incomplete:
        raise IncompleteRouteError(
            f"{len(incomplete)} teams did not get {num_references} hosts and guests: "
            f"{sorted(t.team_number for t in incomplete)}",
            incomplete_teams=incomplete,
        )

    repeated = repeated_meetings(teams)
    if repeated:
        pairs = [f"{a}-{b}" for a, b in repeated]
        raise RepeatedMeetingError(
            f"{len(repeated)} pairs of teams share a table more than once: {', '.join(pairs[:5])}"
            + (f" (+{len(pairs) - 5} more)" if len(pairs) > 5 else ""),
            meetings=repeated,
        )

    return graph


def build_segment(segment: SegmentMapping, graph: RouteGraph) -> None:
    """Build the routes of one segment (course class -> teams of that class)."""
    segment_size = sum(len(t) for t in segment.values())
    template = get_template(segment_size, len(segment))
    if template is not None:
        apply_template(segment, template, graph)
    else:
        logger.info("No template for %d teams, falling back to route search", segment_size)
        search_routes(segment, graph)


def apply_template(segment: SegmentMapping, template: Template, graph: RouteGraph) -> None:
    """Create the host references described by the template."""
    ordered = [team for teams in segment.values() for team in teams]

    def team_at(position: int) -> Team:
        return ordered[position - 1]

    for block in template:
        for host_position, *guest_positions in block:
            host = team_at(host_position)
            for guest_position in guest_positions:
                graph.add_host_reference(team_at(guest_position), host)


def search_routes(segment: SegmentMapping, graph: RouteGraph) -> None:
    """
    Heuristic first-fit search for segments without a template.

    For every team, one host and one guest are taken from each other course
    class. The first eligible candidate wins and nothing is ever undone, so
    some teams may end up with too few references. The caller checks this.
    """
    course_classes = list(segment)
    num_references = len(course_classes) - 1

    for course_class in course_classes:
        other_classes = [c for c in course_classes if c != course_class]

        for team in segment[course_class]:
            plan = team.visitation_plan
            if plan.is_complete(num_references):
                logger.debug("Route of %s is already complete", team)
                continue

            for other_class in other_classes:
                has_host = False
                has_guest = False

                for candidate in segment[other_class]:
                    if has_host and has_guest:
                        break
                    if candidate.visitation_plan.contains_reference(team):
                        continue

                    if not has_host and _can_visit(team, candidate, num_references):
                        logger.debug("%s visits %s", team, candidate)
                        graph.add_host_reference(team, candidate)
                        has_host = True
                        continue

                    if not has_guest and _can_visit(candidate, team, num_references):
                        logger.debug("%s is visited by %s", team, candidate)
                        graph.add_host_reference(candidate, team)
                        has_guest = True


def _can_visit(guest: Team, host: Team, num_references: int) -> bool:
    guest_plan = guest.visitation_plan
    host_plan = host.visitation_plan
    if guest_plan.num_hosts >= num_references or host_plan.num_guests >= num_references:
        return False
    # Every course is eaten once per guest
    if guest_plan.has_host_with_course(host.course_class):
        return False
    # The host must not already receive a team cooking the same course as the guest
    return not host_plan.has_guest_with_course(guest.course_class)
