"""Unit tests for the family build procedure (needs mock Revit API)."""
import os
import shutil
import sys
import tempfile
import unittest
from unittest import mock

CURRENT_DIR = os.path.dirname(__file__)
LIB_PATH = os.path.abspath(os.path.join(CURRENT_DIR, "..", "lib"))
for path in (LIB_PATH, CURRENT_DIR):
    if path not in sys.path:
        sys.path.insert(0, path)

import mock_revit

DB = mock_revit.install()

from family_builder import builder, templates
from family_builder.errors import (
    FamilyBuilderError, ReferencePlaneNotFoundError, TemplateContentError, TemplateNotFoundError
)
from family_builder.settings import BuilderSettings

XYZ = mock_revit.MockXYZ


class MockApplication(object):
    def __init__(self, version="2024"):
        self.VersionNumber = version
        self.new_family_templates = []

    def NewFamilyDocument(self, template_path):
        self.new_family_templates.append(template_path)
        return MockFamilyDoc()


class MockUIApplication(object):
    def __init__(self, version="2024", active_doc=None):
        self.Application = MockApplication(version)
        self.active_doc = active_doc
        self.opened_paths = []

    def OpenAndActivateDocument(self, path):
        self.opened_paths.append(path)
        return mock.Mock(Document=self.active_doc)


class MockFamilyDoc(object):
    def __init__(self):
        self.saved_as = None

    def SaveAs(self, model_path, options):
        self.saved_as = (model_path, options)


class ProfileCurve(object):
    def __init__(self, name, start, end):
        self.Reference = "ref:" + name
        self._points = (XYZ(*start), XYZ(*end))

    def GetEndPoint(self, index):
        return self._points[index]


class MockProfile(object):
    def __init__(self, curves):
        self.curves = curves

    def get_Item(self, index):
        return self.curves


class MockExtrusion(object):
    Id = 7

    def __init__(self):
        curves = [
            ProfileCurve("bottom", (-1, -1, 0), (1, -1, 0)),
            ProfileCurve("right", (1, -1, 0), (1, 1, 0)),
            ProfileCurve("top", (1, 1, 0), (-1, 1, 0)),
            ProfileCurve("left", (-1, 1, 0), (-1, -1, 0)),
        ]
        self.Sketch = mock.Mock(Profile=MockProfile(curves))

    def get_Parameter(self, builtin_parameter):
        return "extrusion:" + builtin_parameter


class MockFamilyCreate(object):
    def __init__(self):
        self.extrusions = []
        self.dimensions = []

    def NewExtrusion(self, is_solid, profile, sketch_plane, end):
        self.extrusions.append((is_solid, profile, sketch_plane, end))
        return MockExtrusion()

    def NewLinearDimension(self, view, line, references):
        dimension = mock.Mock(references=list(references), AreSegmentsEqual=False, FamilyLabel=None)
        self.dimensions.append(dimension)
        return dimension


class MockFamilyManager(object):
    def __init__(self):
        self.associations = []

    def AddParameter(self, name, group, spec, is_instance):
        parameter = mock.Mock()
        parameter.Definition.Name = name
        return parameter

    def AssociateElementParameterToFamilyParameter(self, element_param, family_param):
        self.associations.append((element_param, family_param))


class MockReferencePlane(object):
    def __init__(self, name, normal):
        self.name = name
        self._plane = mock.Mock(Normal=normal, Origin=XYZ.Zero)

    def GetPlane(self):
        return self._plane

    def GetReference(self):
        return "ref:" + self.name


class MockActiveDoc(object):
    def __init__(self, reference_planes=None, levels=None, sketch_planes=None):
        self.FamilyCreate = MockFamilyCreate()
        self.FamilyManager = MockFamilyManager()
        self.saved_options = None
        level = DB.Level("Ref. Level")
        level.FindAssociatedPlanViewId = lambda: 11
        if reference_planes is None:
            reference_planes = [
                MockReferencePlane("center left/right", XYZ.BasisX),
                MockReferencePlane("center front/back", XYZ.BasisY),
            ]
        self.mock_elements = {
            DB.BuiltInCategory.OST_Levels: [level] if levels is None else levels,
            DB.SketchPlane: ([DB.SketchPlane("Ref. Level")]
                             if sketch_planes is None else sketch_planes),
            DB.ReferencePlane: reference_planes,
        }

    def GetElement(self, element_id):
        return "view:{}".format(element_id)

    def Save(self, options):
        self.saved_options = options


class RunTests(unittest.TestCase):

    def setUp(self):
        self.template_dir = tempfile.mkdtemp()
        self.template_path = os.path.join(self.template_dir, "2024.rft")
        with open(self.template_path, "w") as template_file:
            template_file.write("template")
        self.settings = BuilderSettings(
            extra_template_patterns=[os.path.join(self.template_dir, "{0}.rft")])
        self.uiapp = MockUIApplication("2024")

    def tearDown(self):
        shutil.rmtree(self.template_dir)

    def test_cancelled_when_prompt_returns_none(self):
        with mock.patch.object(builder, "build_square_family") as build:
            result = builder.run(self.uiapp, lambda: None, self.settings)
        self.assertEqual(result, (builder.BuildResult.CANCELLED, None))
        build.assert_not_called()

    def test_cancelled_when_prompt_returns_empty_path(self):
        with mock.patch.object(builder, "build_square_family") as build:
            result = builder.run(self.uiapp, lambda: "", self.settings)
        self.assertEqual(result, (builder.BuildResult.CANCELLED, None))
        build.assert_not_called()

    def test_succeeded_builds_with_settings(self):
        with mock.patch.object(builder, "build_square_family") as build:
            result = builder.run(self.uiapp, lambda: r"C:\out\box.rfa", self.settings)
        self.assertEqual(result, (builder.BuildResult.SUCCEEDED, r"C:\out\box.rfa"))
        build.assert_called_once_with(
            self.uiapp.Application, self.uiapp, self.template_path, r"C:\out\box.rfa",
            self.settings.width_feet, "w")

    def test_template_lookup_runs_before_prompt(self):
        calls = []
        real_lookup = templates.find_family_template

        def lookup(*args, **kwargs):
            calls.append("lookup")
            return real_lookup(*args, **kwargs)

        def prompt():
            calls.append("prompt")
            return r"C:\out\box.rfa"

        with mock.patch.object(templates, "find_family_template", side_effect=lookup), \
                mock.patch.object(builder, "build_square_family"):
            builder.run(self.uiapp, prompt, self.settings)
        self.assertEqual(calls, ["lookup", "prompt"])

    def test_missing_template_raises_before_prompt(self):
        prompt = mock.Mock(return_value=r"C:\out\box.rfa")
        uiapp = MockUIApplication("1999")
        with mock.patch.object(templates, "TEMPLATE_PATTERNS", []):
            with self.assertRaises(TemplateNotFoundError):
                builder.run(uiapp, prompt, self.settings)
        prompt.assert_not_called()


class BuildSquareFamilyTests(unittest.TestCase):

    def setUp(self):
        mock_revit.MockTransaction.log[:] = []

    def build(self, doc):
        uiapp = MockUIApplication("2024", active_doc=doc)
        path = builder.build_square_family(
            uiapp.Application, uiapp, "template.rft", r"C:\out\box.rfa", 2.0)
        return uiapp, path

    def test_family_saved_then_activated(self):
        doc = MockActiveDoc()
        uiapp, path = self.build(doc)
        self.assertEqual(path, r"C:\out\box.rfa")
        self.assertEqual(uiapp.Application.new_family_templates, ["template.rft"])
        self.assertEqual(uiapp.opened_paths, [r"C:\out\box.rfa"])
        self.assertFalse(doc.saved_options.Compact)

    def test_created_family_reported_in_millimetres(self):
        with self.assertLogs("family_builder", level="INFO") as logs:
            self.build(MockActiveDoc())
        self.assertTrue(any("(609.6 mm)" in line for line in logs.output))

    def test_extrusion_and_dimensions(self):
        doc = MockActiveDoc()
        self.build(doc)
        self.assertEqual(mock_revit.MockTransaction.log, ["Create family"])

        is_solid, profile, _, depth = doc.FamilyCreate.extrusions[0]
        self.assertTrue(is_solid)
        self.assertEqual(depth, 2.0)
        self.assertEqual(len(list(profile)[0].items), 4)

        dimensions = doc.FamilyCreate.dimensions
        self.assertEqual(len(dimensions), 4)
        self.assertEqual(dimensions[0].references,
                         ["ref:right", "ref:center front/back", "ref:left"])
        self.assertEqual(dimensions[1].references, ["ref:right", "ref:left"])
        self.assertEqual(dimensions[2].references,
                         ["ref:bottom", "ref:center left/right", "ref:top"])
        self.assertEqual(dimensions[3].FamilyLabel.Definition.Name, "w")

    def test_extrusion_end_associated_with_width(self):
        doc = MockActiveDoc()
        self.build(doc)
        (element_param, family_param), = doc.FamilyManager.associations
        self.assertEqual(element_param, "extrusion:EXTRUSION_END_PARAM")
        self.assertEqual(family_param.Definition.Name, "w")

    def test_missing_center_plane_propagates(self):
        doc = MockActiveDoc(reference_planes=[MockReferencePlane("center left/right", XYZ.BasisX)])
        with self.assertRaises(ReferencePlaneNotFoundError):
            self.build(doc)
        self.assertIsNone(doc.saved_options)
        self.assertEqual(doc.FamilyCreate.dimensions, [])


class TemplateContentTests(unittest.TestCase):

    def test_missing_level_raises_builder_error(self):
        doc = MockActiveDoc(levels=[])
        with self.assertRaises(TemplateContentError):
            builder.find_default_level(doc)

    def test_missing_sketch_plane_raises_builder_error(self):
        doc = MockActiveDoc(sketch_planes=[DB.SketchPlane("Ref. Level", suitable=False),
                                           DB.SketchPlane("Other Level")])
        with self.assertRaises(FamilyBuilderError):
            builder.find_level_sketch_plane(doc, DB.Level("Ref. Level"))

    def test_matching_sketch_plane_found(self):
        wanted = DB.SketchPlane("Ref. Level")
        doc = MockActiveDoc(sketch_planes=[DB.SketchPlane("Ref. Level", suitable=False), wanted])
        self.assertIs(builder.find_level_sketch_plane(doc, DB.Level("Ref. Level")), wanted)


if __name__ == '__main__':
    unittest.main()
