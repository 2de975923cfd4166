# SPDX-License-Identifier: MIT

from symera.cleanup import register_cleanup
from symera.initialize import initialize
from symera.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
