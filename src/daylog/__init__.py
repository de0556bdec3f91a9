# SPDX-License-Identifier: MIT

from daylog.cleanup import register_cleanup
from daylog.initialize import initialize
from daylog.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
