# SPDX-License-Identifier: MIT

from typing import Literal

EntityKind = Literal["intake", "elimination"]


class EntityType:
    INTAKE = "intake"
    ELIMINATION = "elimination"
