# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CSafeLoader as Loader
except ImportError:
    from yaml import SafeLoader as Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "daylog"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

DEFAULT_STORAGE_KEY = "daylog-data"
DEFAULT_INTAKE_CATEGORY = "Drink"
DEFAULT_LOOKBACK_MONTHS = 5
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
STORAGE_KEY: str = DEFAULT_STORAGE_KEY


class Configuration(TypedDict):
    data_path: Optional[str]
    storage_key: str
    default_intake_category: str
    lookback_months: int
    log_level: str
    show_header: bool


def get_default_configuration() -> Configuration:
    return {
        "data_path": None,
        "storage_key": DEFAULT_STORAGE_KEY,
        "default_intake_category": DEFAULT_INTAKE_CATEGORY,
        "lookback_months": DEFAULT_LOOKBACK_MONTHS,
        "log_level": DEFAULT_LOG_LEVEL,
        "show_header": True,
    }


def load_data_path_configuration() -> None:
    """
    Load the configuration and set DATA_PATH and STORAGE_KEY dynamically.

    This must be called after the config file exists and before the
    slot repository is first used.
    """
    global DATA_PATH, STORAGE_KEY

    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        DATA_PATH = Path(data_path_setting)

    storage_key_setting = config.get("storage_key")
    if storage_key_setting:
        STORAGE_KEY = storage_key_setting
