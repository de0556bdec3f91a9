# SPDX-License-Identifier: MIT

import time
from typing import TypeAlias

EntityId: TypeAlias = int


class IdGenerator:
    """
    Monotonic integer ids seeded from the microsecond clock.

    Every id is strictly greater than the previous one, so rapid successive
    creates within the same clock tick never collide.
    """

    def __init__(self) -> None:
        self._last = 0

    def next_id(self) -> EntityId:
        candidate = time.time_ns() // 1_000
        self._last = max(candidate, self._last + 1)
        return self._last

    def observe(self, entity_id: EntityId) -> None:
        """Never hand out an id at or below one already in the store."""
        if entity_id > self._last:
            self._last = entity_id


ID_GENERATOR = IdGenerator()
