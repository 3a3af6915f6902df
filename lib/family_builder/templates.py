# -*- coding: utf-8 -*-
"""Family template lookup for the running Revit version."""

import os.path as op

from family_builder.errors import TemplateNotFoundError

# Tried in order; {0} is replaced by the Revit version number (e.g. "2024")
TEMPLATE_PATTERNS = [
    r"C:\ProgramData\Autodesk\RVT {0}\Family Templates\Russian\Метрическая система, типовая модель.rft",
    r"C:\ProgramData\Autodesk\RVT {0}\Family Templates\English\Metric Generic Model.rft",
    r"C:\ProgramData\Autodesk\RVT {0}\Family Templates\German\Allgemeines Modell.rft",
]


def candidate_template_paths(version, patterns=None):
    """Format every template pattern with the Revit version.

    Args:
        version: Revit version number as reported by the application
        patterns: Optional list of patterns, defaults to TEMPLATE_PATTERNS

    Returns:
        list: Template paths in lookup order
    """
    if patterns is None:
        patterns = TEMPLATE_PATTERNS
    return [pattern.format(version) for pattern in patterns]


def find_family_template(version, patterns=None, exists=op.exists):
    """Get the first template path that exists on disk.

    Args:
        version: Revit version number
        patterns: Optional list of patterns, defaults to TEMPLATE_PATTERNS
        exists: Predicate used to test a path

    Returns:
        str: Template file path

    Raises:
        TemplateNotFoundError: None of the candidates exist
    """
    candidates = candidate_template_paths(version, patterns)
    for path in candidates:
        if exists(path):
            return path
    raise TemplateNotFoundError(version, candidates)
