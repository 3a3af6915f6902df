# -*- coding: utf-8 -*-
"""Plain-tuple geometry for the square extrusion profile and its dimensions.

Points are (x, y, z) tuples in Revit internal units (feet). The Revit-facing
modules turn them into XYZ/Line objects.
"""

import math

# Distance from the profile edge to the dimension line, in feet
EQUALITY_DIMENSION_OFFSET = 2.0
LABEL_DIMENSION_OFFSET = 1.0


def square_profile_points(width):
    """Corners of a square centred on the origin, counter-clockwise.

    Args:
        width: Side length, must be positive and finite

    Returns:
        list: [p0, p1, p2, p3] starting at (-w/2, -w/2, 0)
    """
    if math.isnan(width) or math.isinf(width) or width <= 0:
        raise ValueError("Profile width must be a positive finite number, got {}".format(width))

    half = width / 2.0
    return [
        (-half, -half, 0.0),
        (half, -half, 0.0),
        (half, half, 0.0),
        (-half, half, 0.0),
    ]


def square_profile_edges(width):
    """Closed loop of (start, end) pairs around the square."""
    points = square_profile_points(width)
    return [(points[i], points[(i + 1) % len(points)]) for i in range(len(points))]


def dimension_line_points(start, end, offset):
    """Shift the segment start-end sideways by offset.

    The shift follows the in-plane perpendicular (-dy, dx, 0) of the unit
    direction, so the dimension is drawn to the left of start -> end.

    Returns:
        tuple: (new_start, new_end)
    """
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    dz = end[2] - start[2]
    length = math.sqrt(dx * dx + dy * dy + dz * dz)
    if length == 0:
        raise ValueError("Cannot place a dimension on a zero-length segment")

    shift_x = -dy / length * offset
    shift_y = dx / length * offset
    return (
        (start[0] + shift_x, start[1] + shift_y, start[2]),
        (end[0] + shift_x, end[1] + shift_y, end[2]),
    )
