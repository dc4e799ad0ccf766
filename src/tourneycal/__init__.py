# SPDX-License-Identifier: MIT

from tourneycal.cleanup import register_cleanup
from tourneycal.initialize import initialize
from tourneycal.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
