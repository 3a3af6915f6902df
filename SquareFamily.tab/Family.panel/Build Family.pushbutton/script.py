# -*- coding: utf-8 -*-
"""Build a square extrusion family.

Creates a new family from the Generic Model template of the running Revit
version, extrudes a square profile and drives its width and depth with a
single length parameter.
"""

__title__ = "Build Family"
__author__ = "Square Family Builder"
__doc__ = "Create a square extrusion family driven by one width parameter"
__context__ = "zero-doc"

# Import standard libraries
import sys
import os.path as op

# Import pyRevit modules
from pyrevit import HOST_APP
from pyrevit import script
from pyrevit import forms

# Add the extension lib folder to the path
# Structure: extension_root/SquareFamily.tab/Family.panel/Build Family.pushbutton/
pushbutton_dir = op.dirname(__file__)
extension_dir = op.dirname(op.dirname(op.dirname(pushbutton_dir)))
lib_path = op.join(extension_dir, 'lib')
if lib_path not in sys.path:
    sys.path.append(lib_path)

from family_builder import builder, config
from family_builder.errors import TemplateNotFoundError

logger = script.get_logger()

SAVE_DIALOG_TITLE = "Select file to create family"


def prompt_save_path(settings):
    """Ask for the target .rfa file, remembering the last folder."""
    save_path = forms.save_file(
        file_ext='rfa',
        init_dir=settings.last_directory,
        restore_dir=True,
        title=SAVE_DIALOG_TITLE
    )
    if save_path:
        settings.last_directory = op.dirname(save_path)
        config.save_settings(settings)
    return save_path


# --- Main Execution ---

if __name__ == '__main__':
    settings = config.load_settings()

    try:
        result, family_path = builder.run(
            HOST_APP.uiapp, lambda: prompt_save_path(settings), settings)
    except TemplateNotFoundError as ex:
        logger.error("Searched templates: {}".format(ex.searched_paths))
        forms.alert("No family template found for Revit {}.\n\nSearched:\n{}".format(
            ex.version, "\n".join(ex.searched_paths)),
            title="Template Not Found", exitscript=True)

    if result == builder.BuildResult.CANCELLED:
        script.exit()

    logger.debug("{}: {}".format(result, family_path))
