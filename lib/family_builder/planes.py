# -*- coding: utf-8 -*-
"""Lookup of the centering reference planes in a family template."""

from family_builder.errors import ReferencePlaneNotFoundError


def is_central_plane(plane, normal, origin):
    """Check whether a plane passes through origin with the given normal.

    Either orientation of the normal is accepted. Comparison uses the host
    tolerance of XYZ.IsAlmostEqualTo.
    """
    plane_normal = plane.Normal
    if not (plane_normal.IsAlmostEqualTo(normal) or
            plane_normal.IsAlmostEqualTo(normal.Negate())):
        return False
    return plane.Origin.IsAlmostEqualTo(origin)


def find_central_reference_plane(reference_planes, normal, origin):
    """Get the reference of the first centering plane for a normal.

    Args:
        reference_planes: Iterable of ReferencePlane elements
        normal: XYZ normal to match
        origin: XYZ the plane must pass through

    Returns:
        Reference: Reference of the matching plane

    Raises:
        ReferencePlaneNotFoundError: No plane matches
    """
    for reference_plane in reference_planes:
        if is_central_plane(reference_plane.GetPlane(), normal, origin):
            return reference_plane.GetReference()
    raise ReferencePlaneNotFoundError(
        "Reference plane not found for normal {}".format(normal))
