# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CSafeDumper as Dumper
    from yaml import CSafeLoader as Loader
except ImportError:
    from yaml import SafeDumper as Dumper, SafeLoader as Loader  # type: ignore[assignment]

from daylog import configuration


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        loaded = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)
        self._config = configuration.get_default_configuration()

        if loaded is None:
            return

        # Migration: keys missing from older config files keep their defaults
        for key in self._config.keys():
            if key in loaded:
                self._config[key] = loaded[key]  # type: ignore[literal-required]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        storage_key: Optional[str] = None,
        default_intake_category: Optional[str] = None,
        lookback_months: Optional[int] = None,
        log_level: Optional[str] = None,
        show_header: Optional[bool] = None,
    ) -> None:
        self.is_dirty = True

        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if storage_key is not None:
            self.config["storage_key"] = storage_key
        if default_intake_category is not None:
            self.config["default_intake_category"] = default_intake_category
        if lookback_months is not None:
            self.config["lookback_months"] = lookback_months
        if log_level is not None:
            self.config["log_level"] = log_level
        if show_header is not None:
            self.config["show_header"] = show_header


CONFIGURATION_REPO = ConfigurationRepository()
