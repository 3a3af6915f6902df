# -*- coding: utf-8 -*-
"""User settings for the square family builder."""

import math

from family_builder.units import mm_to_feet

DEFAULT_WIDTH_MM = 500
DEFAULT_PARAMETER_NAME = "w"


class BuilderSettings(object):
    """Width, parameter name and template search settings."""

    def __init__(self, width_mm=DEFAULT_WIDTH_MM, parameter_name=DEFAULT_PARAMETER_NAME,
                 extra_template_patterns=None, last_directory=""):
        self.width_mm = width_mm
        self.parameter_name = parameter_name
        self.extra_template_patterns = list(extra_template_patterns or [])
        self.last_directory = last_directory

    @property
    def width_feet(self):
        return mm_to_feet(self.width_mm)

    def template_patterns(self, builtin_patterns):
        """User patterns first, then the built-in ones."""
        return self.extra_template_patterns + list(builtin_patterns)

    def to_dict(self):
        return {
            "width_mm": self.width_mm,
            "parameter_name": self.parameter_name,
            "extra_template_patterns": list(self.extra_template_patterns),
            "last_directory": self.last_directory,
        }

    @classmethod
    def from_dict(cls, data):
        """Build settings from stored values, falling back to defaults.

        Non-numeric or non-positive widths and blank parameter names are
        replaced by the defaults.
        """
        data = data or {}
        width_mm = parse_width(data.get("width_mm"))
        if width_mm is None:
            width_mm = DEFAULT_WIDTH_MM

        parameter_name = (data.get("parameter_name") or "").strip()
        if not parameter_name:
            parameter_name = DEFAULT_PARAMETER_NAME

        patterns = data.get("extra_template_patterns") or []
        if not isinstance(patterns, (list, tuple)):
            patterns = [patterns]

        return cls(
            width_mm=width_mm,
            parameter_name=parameter_name,
            extra_template_patterns=[p for p in patterns if p],
            last_directory=data.get("last_directory") or "",
        )


def parse_width(value):
    """Parse a width in millimetres; None when missing, invalid, non-finite or not positive."""
    if value is None:
        return None
    try:
        width = float(str(value).strip().replace(",", "."))
    except ValueError:
        return None
    if math.isnan(width) or math.isinf(width) or width <= 0:
        return None
    return width
