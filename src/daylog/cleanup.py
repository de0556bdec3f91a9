# SPDX-License-Identifier: MIT

import atexit

from daylog.repository.configuration import CONFIGURATION_REPO


def flush() -> None:
    # The day store saves on every mutation; only configuration is deferred
    CONFIGURATION_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush)
