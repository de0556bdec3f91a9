# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional

from daylog import configuration


class SlotRepository:
    """
    Local key-value store with one YAML document per key.

    The data directory is resolved on each access so that a data_path
    configured after import is honoured.
    """

    def __init__(self, data_path: Optional[Path] = None) -> None:
        self._data_path = data_path

    @property
    def data_path(self) -> Path:
        if self._data_path is not None:
            return self._data_path
        return configuration.DATA_PATH

    def __slot_path(self, key: str) -> Path:
        return self.data_path / f"{key}.yaml"

    def read(self, key: str) -> Optional[str]:
        slot_path = self.__slot_path(key)
        if not slot_path.is_file():
            return None
        return slot_path.read_text(encoding="utf-8")

    def write(self, key: str, value: str) -> None:
        self.data_path.mkdir(parents=True, exist_ok=True)
        self.__slot_path(key).write_text(value, encoding="utf-8")


SLOT_REPO = SlotRepository()
