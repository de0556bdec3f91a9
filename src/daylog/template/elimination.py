# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from daylog.model.elimination import EliminationFields
from daylog.time import now_time

ELIMINATION_GLYPHS = ["🚽", "💦", "🌊", "🐥", "🐤", "🦆", "😊", "🤖", "🧻"]


def get_elimination_template(
    now: Optional[pendulum.DateTime] = None,
) -> EliminationFields:
    return {
        "glyph": "",
        "time": now_time(now),
        "magnitude": 2,
    }
