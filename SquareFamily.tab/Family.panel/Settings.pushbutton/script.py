# -*- coding: utf-8 -*-
"""Square family builder settings.

Sets the profile width and the name of the driving parameter used by
Build Family.
"""

__title__ = "Settings"
__author__ = "Square Family Builder"
__doc__ = "Square family builder settings"
__context__ = "zero-doc"

# Import standard libraries
import sys
import os.path as op

# Import pyRevit modules
from pyrevit import script
from pyrevit import forms

# Add the extension lib folder to the path
pushbutton_dir = op.dirname(__file__)
extension_dir = op.dirname(op.dirname(op.dirname(pushbutton_dir)))
lib_path = op.join(extension_dir, 'lib')
if lib_path not in sys.path:
    sys.path.append(lib_path)

from family_builder import config
from family_builder.settings import parse_width

# Initialize logger
logger = script.get_logger()


if __name__ == '__main__':
    settings = config.load_settings()

    width_text = forms.ask_for_string(
        default=str(settings.width_mm),
        prompt="Profile width (mm):",
        title="Square Family Settings"
    )
    if width_text is None:
        script.exit()

    width_mm = parse_width(width_text)
    if width_mm is None:
        forms.alert("Width must be a positive number, got '{}'.".format(width_text),
                    title="Invalid Width", exitscript=True)

    parameter_name = forms.ask_for_string(
        default=settings.parameter_name,
        prompt="Width parameter name:",
        title="Square Family Settings"
    )
    if parameter_name is None:
        script.exit()
    if not parameter_name.strip():
        forms.alert("Parameter name cannot be empty.", title="Invalid Name", exitscript=True)

    settings.width_mm = width_mm
    settings.parameter_name = parameter_name.strip()
    config.save_settings(settings)
    logger.info("Width: {} mm, parameter: '{}'".format(settings.width_mm, settings.parameter_name))
