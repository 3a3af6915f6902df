# -*- coding: utf-8 -*-
"""Family parameter helpers that bridge Revit API versions."""

from pyrevit import script

logger = script.get_logger()

# AddParameter takes ForgeTypeId group/spec from this version on
FORGE_TYPE_ID_VERSION = 2022


def add_length_parameter(family_manager, name, version, is_instance=True):
    """Add a length family parameter in the Geometry group.

    Args:
        family_manager: FamilyManager of the family document
        name: Parameter name
        version: Revit version number (str or int)
        is_instance: Instance parameter when True, type parameter otherwise

    Returns:
        FamilyParameter: The new parameter
    """
    if int(version) >= FORGE_TYPE_ID_VERSION:
        from Autodesk.Revit.DB import GroupTypeId, SpecTypeId
        group = GroupTypeId.Geometry
        spec = SpecTypeId.Length
    else:
        from Autodesk.Revit.DB import BuiltInParameterGroup, ParameterType
        group = BuiltInParameterGroup.PG_GEOMETRY
        spec = ParameterType.Length

    parameter = family_manager.AddParameter(name, group, spec, is_instance)
    logger.debug("Added length parameter '{}' (instance: {})".format(name, is_instance))
    return parameter
