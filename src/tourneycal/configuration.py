# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import NotRequired, Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "tourneycal"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_TOURNAMENTS_DIR: Path = DATA_PATH / "tournaments"


class Configuration(TypedDict):
    show_header: bool
    data_path: Optional[str]
    max_visible_tracks: int
    cell_width: int
    log_level: str
    default_region: NotRequired[Optional[str]]


def get_default_configuration() -> Configuration:
    return {
        "show_header": True,
        "data_path": None,
        "max_visible_tracks": 3,
        "cell_width": 18,
        "log_level": "WARNING",
        "default_region": None,
    }


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_TOURNAMENTS_DIR

    DATA_PATH = data_path
    DATA_TOURNAMENTS_DIR = DATA_PATH / "tournaments"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are instantiated.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        set_data_path(Path(data_path_setting))
