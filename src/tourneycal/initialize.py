# SPDX-License-Identifier: MIT

import logging

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from tourneycal import configuration

logger = logging.getLogger(__name__)


def initialize() -> None:
    """Create the config file and tournament directory on first run."""
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    if not configuration.APP_CONFIG_PATH.is_file():
        defaults = dict(configuration.get_default_configuration())
        configuration.APP_CONFIG_PATH.write_text(dump(defaults, Dumper=Dumper))
        logger.debug("created %s", configuration.APP_CONFIG_PATH)

    # data_path may point elsewhere, so it is resolved after the config exists
    configuration.load_data_path_configuration()
    configuration.DATA_TOURNAMENTS_DIR.mkdir(parents=True, exist_ok=True)
