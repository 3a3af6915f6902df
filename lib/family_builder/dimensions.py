# -*- coding: utf-8 -*-
"""Dimension creation in family documents."""

from Autodesk.Revit.DB import Line, ReferenceArray, XYZ
from pyrevit import script

from family_builder.profile import (
    dimension_line_points, EQUALITY_DIMENSION_OFFSET, LABEL_DIMENSION_OFFSET
)

logger = script.get_logger()


def _to_tuple(point):
    return (point.X, point.Y, point.Z)


def create_dimension(doc, curve_a, curve_b, view, family_param=None, center_reference=None):
    """Create a linear dimension between two parallel profile curves.

    With a center reference the dimension gets three references and its
    segments are set equal. Without one it spans the two curves and is
    labelled with family_param when given.

    Args:
        doc: Family document
        curve_a: First curve (its start point anchors the dimension line)
        curve_b: Second curve (its end point closes the dimension line)
        view: Plan view to place the dimension in
        family_param: Optional FamilyParameter used as label
        center_reference: Optional Reference between the two curves

    Returns:
        Dimension: The created dimension
    """
    is_equality = center_reference is not None

    references = ReferenceArray()
    references.Append(curve_a.Reference)
    if is_equality:
        references.Append(center_reference)
    references.Append(curve_b.Reference)

    offset = EQUALITY_DIMENSION_OFFSET if is_equality else LABEL_DIMENSION_OFFSET
    start, end = dimension_line_points(
        _to_tuple(curve_a.GetEndPoint(0)), _to_tuple(curve_b.GetEndPoint(1)), offset)
    dimension_line = Line.CreateBound(XYZ(*start), XYZ(*end))

    dimension = doc.FamilyCreate.NewLinearDimension(view, dimension_line, references)
    if is_equality:
        dimension.AreSegmentsEqual = True
        logger.debug("Created equality dimension {}".format(dimension.Id))
    elif family_param is not None:
        dimension.FamilyLabel = family_param
        logger.debug("Created dimension {} labelled '{}'".format(
            dimension.Id, family_param.Definition.Name))
    return dimension
