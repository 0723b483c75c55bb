"""
Precomputed route templates, keyed by segment size.

A template has one block per course class (in course class order). Every row
of a block lists a host followed by its guests. Teams are referenced by their
1-based position in the segment: with m teams per course class, positions
1..m are the teams of the first course class, m+1..2m those of the second,
and so on.

All templates let any two teams meet at most once during the evening.
"""

Template = tuple[tuple[tuple[int, ...], ...], ...]

SEGMENT_TEMPLATES: dict[int, Template] = {
    # 2 course classes
    4: (
        ((1, 3), (2, 4)),
        ((3, 2), (4, 1)),
    ),
    6: (
        ((1, 4), (2, 5), (3, 6)),
        ((4, 3), (5, 1), (6, 2)),
    ),
    # 3 course classes
    9: (
        ((1, 4, 7), (2, 5, 8), (3, 6, 9)),
        ((4, 2, 9), (5, 3, 7), (6, 1, 8)),
        ((7, 2, 6), (8, 3, 4), (9, 1, 5)),
    ),
    12: (
        ((1, 5, 9), (2, 6, 10), (3, 7, 11), (4, 8, 12)),
        ((5, 10, 11), (6, 9, 12), (7, 1, 4), (8, 2, 3)),
        ((9, 2, 7), (10, 1, 8), (11, 4, 6), (12, 3, 5)),
    ),
    15: (
        ((1, 6, 11), (2, 7, 12), (3, 8, 13), (4, 9, 14), (5, 10, 15)),
        ((6, 5, 12), (7, 1, 13), (8, 2, 14), (9, 3, 15), (10, 4, 11)),
        ((11, 2, 9), (12, 3, 10), (13, 4, 6), (14, 5, 7), (15, 1, 8)),
    ),
    # 4 course classes
    16: (
        ((1, 5, 9, 13), (2, 6, 10, 14), (3, 7, 11, 15), (4, 8, 12, 16)),
        ((5, 2, 12, 15), (6, 1, 11, 16), (7, 4, 10, 13), (8, 3, 9, 14)),
        ((9, 4, 6, 15), (10, 3, 5, 16), (11, 2, 8, 13), (12, 1, 7, 14)),
        ((13, 3, 6, 12), (14, 4, 5, 11), (15, 1, 8, 10), (16, 2, 7, 9)),
    ),
}


def get_template(segment_size: int, num_course_classes: int) -> Template | None:
    """Return the template for the segment, or None if there is none."""
    template = SEGMENT_TEMPLATES.get(segment_size)
    if template is None or len(template) != num_course_classes:
        return None
    return template
