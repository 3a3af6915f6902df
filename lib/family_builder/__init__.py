# -*- coding: utf-8 -*-
"""Square family builder library.

This module provides functionality for:
- Locating a family template that matches the running Revit version
- Creating a square extrusion family driven by a single width parameter
"""

__version__ = "1.0.0"
