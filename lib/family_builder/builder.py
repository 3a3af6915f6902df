# -*- coding: utf-8 -*-
"""Creation of a square extrusion family driven by one width parameter.

The procedure:
- saves a new family document created from the version's template
- draws a square profile centred on the origin and extrudes it by the width
- dimensions the profile against the centering reference planes
- labels the width dimensions and the extrusion end with one parameter
"""

from Autodesk.Revit.DB import (
    FilteredElementCollector, BuiltInCategory, BuiltInParameter, CurveArray,
    CurveArrArray, Level, Line, ModelPathUtils, ReferencePlane, SaveAsOptions,
    SaveOptions, SketchPlane, XYZ
)
from pyrevit import revit, script

from family_builder import templates
from family_builder.dimensions import create_dimension
from family_builder.errors import ReferencePlaneNotFoundError, TemplateContentError
from family_builder.parameters import add_length_parameter
from family_builder.planes import find_central_reference_plane
from family_builder.profile import square_profile_edges
from family_builder.units import feet_to_mm

logger = script.get_logger()

TRANSACTION_NAME = "Create family"


class BuildResult(object):
    SUCCEEDED = "Succeeded"
    CANCELLED = "Cancelled"


def find_default_level(doc):
    """Get the first level of the family document."""
    levels = FilteredElementCollector(doc)\
        .OfCategory(BuiltInCategory.OST_Levels)\
        .WhereElementIsNotElementType()\
        .ToElements()
    for level in levels:
        if isinstance(level, Level):
            return level
    raise TemplateContentError("Family template contains no level")


def find_level_sketch_plane(doc, level):
    """Get the model sketch plane named after the level."""
    for sketch_plane in FilteredElementCollector(doc).OfClass(SketchPlane):
        if sketch_plane.IsSuitableForModelElements and sketch_plane.Name == level.Name:
            return sketch_plane
    raise TemplateContentError("No sketch plane found for level '{}'".format(level.Name))


def build_square_extrusion(doc, width, sketch_plane):
    """Create a solid square extrusion of the given width and depth."""
    curve_array = CurveArray()
    for start, end in square_profile_edges(width):
        curve_array.Append(Line.CreateBound(XYZ(*start), XYZ(*end)))

    profile = CurveArrArray()
    profile.Append(curve_array)

    extrusion = doc.FamilyCreate.NewExtrusion(True, profile, sketch_plane, width)
    logger.debug("Created extrusion {} ({} ft)".format(extrusion.Id, width))
    return extrusion


def get_profile_lines(extrusion):
    """Profile curves of the extrusion sketch, in sketch order."""
    return [curve for curve in extrusion.Sketch.Profile.get_Item(0)]


def create_family_document(app, uiapp, template_path, save_path):
    """Create a family from the template, save it and make it active.

    Returns:
        Document: The active family document at save_path
    """
    family_doc = app.NewFamilyDocument(template_path)

    save_options = SaveAsOptions()
    save_options.OverwriteExistingFile = True
    save_options.MaximumBackups = 1
    family_doc.SaveAs(ModelPathUtils.ConvertUserVisiblePathToModelPath(save_path), save_options)
    logger.debug("Saved new family document to: {}".format(save_path))

    return uiapp.OpenAndActivateDocument(save_path).Document


def build_square_family(app, uiapp, template_path, save_path, width, parameter_name="w"):
    """Create, parameterise and save the square family.

    Args:
        app: Revit Application
        uiapp: Revit UIApplication
        template_path: Family template (.rft) to start from
        save_path: Target .rfa path
        width: Profile side and extrusion depth in feet
        parameter_name: Name of the driving length parameter

    Returns:
        str: The saved family path

    Raises:
        ReferencePlaneNotFoundError: The template has no centering planes
    """
    doc = create_family_document(app, uiapp, template_path, save_path)

    with revit.Transaction(TRANSACTION_NAME, doc):
        level = find_default_level(doc)
        sketch_plane = find_level_sketch_plane(doc, level)
        extrusion = build_square_extrusion(doc, width, sketch_plane)

        width_param = add_length_parameter(doc.FamilyManager, parameter_name, app.VersionNumber)
        plan_view = doc.GetElement(level.FindAssociatedPlanViewId())

        reference_planes = list(FilteredElementCollector(doc).OfClass(ReferencePlane))
        try:
            center_y = find_central_reference_plane(reference_planes, XYZ.BasisY, XYZ.Zero)
            center_x = find_central_reference_plane(reference_planes, XYZ.BasisX, XYZ.Zero)
        except ReferencePlaneNotFoundError as ex:
            logger.error("Template '{}' has no centering reference planes: {}".format(
                template_path, ex))
            raise

        lines = get_profile_lines(extrusion)
        create_dimension(doc, lines[1], lines[3], plan_view, center_reference=center_y)
        create_dimension(doc, lines[1], lines[3], plan_view, family_param=width_param)
        create_dimension(doc, lines[0], lines[2], plan_view, center_reference=center_x)
        create_dimension(doc, lines[0], lines[2], plan_view, family_param=width_param)

        doc.FamilyManager.AssociateElementParameterToFamilyParameter(
            extrusion.get_Parameter(BuiltInParameter.EXTRUSION_END_PARAM), width_param)
        logger.debug("Associated extrusion end with '{}'".format(parameter_name))

    save_options = SaveOptions()
    save_options.Compact = False
    doc.Save(save_options)
    logger.info("Created family: {} ({:g} mm)".format(save_path, feet_to_mm(width)))
    return save_path


def run(uiapp, prompt_save_path, settings):
    """Locate the template, ask for a target path and build the family.

    Args:
        uiapp: Revit UIApplication
        prompt_save_path: Callable returning the chosen .rfa path or None
        settings: BuilderSettings

    Returns:
        tuple: (BuildResult value, saved path or None)

    Raises:
        TemplateNotFoundError: No template exists for this Revit version
    """
    app = uiapp.Application
    template_path = templates.find_family_template(
        app.VersionNumber, settings.template_patterns(templates.TEMPLATE_PATTERNS))
    logger.debug("Using family template: {}".format(template_path))

    save_path = prompt_save_path()
    if not save_path:
        logger.debug("Save dialog cancelled")
        return BuildResult.CANCELLED, None

    build_square_family(app, uiapp, template_path, save_path,
                        settings.width_feet, settings.parameter_name)
    return BuildResult.SUCCEEDED, save_path
