# -*- coding: utf-8 -*-
"""Persistence of builder settings in the pyRevit user config."""

from pyrevit import script
from pyrevit.userconfig import user_config

from family_builder.settings import BuilderSettings

# Initialize logger
logger = script.get_logger()

CONFIG_SECTION = 'SquareFamilyBuilder'
CONFIG_KEYS = ("width_mm", "parameter_name", "extra_template_patterns", "last_directory")


def load_settings():
    """Read settings from the user config, defaults for anything missing."""
    stored = {}
    try:
        if hasattr(user_config, CONFIG_SECTION):
            section = getattr(user_config, CONFIG_SECTION)
            for key in CONFIG_KEYS:
                stored[key] = section.get_option(key, default_value=None)
    except Exception as ex:
        logger.error("Error reading family builder settings: {}".format(ex))
    return BuilderSettings.from_dict(stored)


def save_settings(settings):
    """Write settings to the user config."""
    if not hasattr(user_config, CONFIG_SECTION):
        user_config.add_section(CONFIG_SECTION)

    section = getattr(user_config, CONFIG_SECTION)
    for key, value in settings.to_dict().items():
        section.set_option(key, value)

    user_config.save_changes()
    logger.debug("Saved family builder settings: {}".format(settings.to_dict()))
