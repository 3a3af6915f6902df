# -*- coding: utf-8 -*-
"""Length conversions between millimetres and Revit internal feet."""

MM_PER_FOOT = 304.8


def mm_to_feet(value):
    return float(value) / MM_PER_FOOT


def feet_to_mm(value):
    return float(value) * MM_PER_FOOT
