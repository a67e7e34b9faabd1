"""Command line entry point."""

from __future__ import annotations

import sys

from .config import ConfigError
from .show import ShowError, show
from .use import UseError, use

VERSION = "0.0.1"

_BANNER = "=============================="


def help_text(is_error: bool) -> str:
    """Return the usage message, with a warning banner for bad arguments."""
    lines = []
    if is_error:
        lines += [_BANNER, "This is an incorrect parameter", _BANNER]
    lines += [
        "This is sdkvm (sdk version management).",
        f"Version: {VERSION}",
        "Usage: sdkvm [help|show|use]",
        "Usage: sdkvm help",
        "Usage: sdkvm show",
        "Usage: sdkvm use <sdk_name> <sdk_version>",
    ]
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Run the command given by ``argv`` and return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)

    if args == ["help"]:
        sys.stdout.write(help_text(False))
    elif args == ["show"]:
        try:
            show()
        except ShowError as exc:
            print(exc, file=sys.stderr)
        except ConfigError as exc:
            print(exc, file=sys.stderr)
            return 1
    elif len(args) == 3 and args[0] == "use":
        try:
            use(args[1], args[2])
        except UseError as exc:
            print(exc, file=sys.stderr)
    else:
        sys.stdout.write(help_text(True))
    return 0


if __name__ == "__main__":
    sys.exit(main())