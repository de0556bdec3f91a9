# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from daylog.model.intake import IntakeFields
from daylog.time import now_time

INTAKE_GLYPHS = ["💧", "🥛", "☕", "🍸", "🥃", "🧃", "🍺", "🍵"]


def get_intake_template(now: Optional[pendulum.DateTime] = None) -> IntakeFields:
    return {
        "glyph": "",
        "category": "",
        "time": now_time(now),
        "quantity": "",
    }
