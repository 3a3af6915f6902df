# -*- coding: utf-8 -*-
"""Exceptions raised by the square family builder."""


class FamilyBuilderError(Exception):
    """Base class for family builder failures."""


class TemplateNotFoundError(FamilyBuilderError):
    """No family template exists for the running Revit version."""

    def __init__(self, version, searched_paths):
        self.version = version
        self.searched_paths = list(searched_paths)
        super(TemplateNotFoundError, self).__init__(
            "No family template found for Revit {}".format(version))


class ReferencePlaneNotFoundError(FamilyBuilderError):
    """No reference plane with the requested normal passes through the origin."""


class TemplateContentError(FamilyBuilderError):
    """The family template lacks an element the builder relies on."""
