# SPDX-License-Identifier: MIT

from numpad.cleanup import register_cleanup
from numpad.initialize import initialize
from numpad.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
