from __future__ import annotations
import argparse
import logging
import sys
from . import __version__
from .git import GitError, GitGateway
from .prompt import statusline
from .styles import ANSIStyler, BashStyler, Styler, ZshStyler

log = logging.getLogger("statusline")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description=(
            "Print a compact Git-aware prompt segment for the current"
            " directory"
        )
    )
    parser.add_argument(
        "--ansi",
        action="store_const",
        dest="stylecls",
        const=ANSIStyler,
        help="Format prompt for direct display (default)",
    )
    parser.add_argument(
        "--bash",
        action="store_const",
        dest="stylecls",
        const=BashStyler,
        help="Format prompt for Bash's PS1",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help=(
            "Set the logging level for messages written to stderr"
            "  [default: WARNING]"
        ),
    )
    parser.add_argument(
        "--zsh",
        action="store_const",
        dest="stylecls",
        const=ZshStyler,
        help="Format prompt for zsh's PS1",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(
        format="%(name)s: [%(levelname)-8s] %(message)s",
        level=getattr(logging, args.log_level),
        stream=sys.stderr,
    )
    styler: Styler = (args.stylecls or ANSIStyler)()
    try:
        s = statusline(GitGateway())
    except GitError as e:
        log.error("%s", e)
        sys.exit(1)
    print(styler(s))


if __name__ == "__main__":
    main()
