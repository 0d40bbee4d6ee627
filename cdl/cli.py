import argparse
import io
import logging
import sys
from typing import Optional

from rich.console import Console
from rich.text import Text

from cdl.container import DependencyContainer, container
from cdl.exceptions import BaseAppError, ExitCode

DESCRIPTION = """\
Change into a directory and immediately print a compact, colored listing.

The target directory is, in order of preference:
  - the DIRECTORY argument, when given;
  - the first non-empty line of stdin, when stdin is not a TTY;
  - $HOME (or / when HOME is unset).
"""

EPILOG = """\
Listing format:
  With GNU ls (or gls), entries are shown as SIZE  DATE TIME  NAME with
  directories first. On terminals of 100 columns or more the listing is
  split into two columns when both halves fit; otherwise one column is used.
  Other ls implementations get a plain `ls -AlhG` listing.

Pipe limitation:
  A program cannot change its parent shell's directory. `cdl` lists the
  target; use `cd "$(...)"` to actually move your shell there.

Return codes:
  0  Success.
  1  Generic error.
  2  Directory does not exist or cannot be accessed.
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cdl",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=None,
        help="Directory to enter and list (default: stdin or $HOME)",
    )
    return parser


def run(
    directory: Optional[str],
    deps: DependencyContainer,
    stdin=None,
    stdout=None,
) -> int:
    """Resolve, enter and list the target directory, writing the listing to stdout."""
    stdout = stdout or sys.stdout
    target = deps.get_resolve_target_use_case().execute(directory, stdin)
    deps.get_change_directory_use_case().execute(target)
    text = deps.get_print_listing_use_case().execute(".")
    if isinstance(stdout, io.TextIOWrapper):
        # Names that are not valid UTF-8 go back out as the original bytes.
        stdout.reconfigure(errors="surrogateescape")
    # Written raw: the listing carries its own color codes.
    stdout.write(text)
    stdout.flush()
    return ExitCode.SUCCESS


def print_error(console: Console, message: str) -> None:
    # Text keeps brackets in paths from being read as rich markup.
    console.print(Text.assemble(("ERROR:", "bold red"), f" {message}"))


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    err = Console(stderr=True, highlight=False)

    try:
        level = container.get_settings().log_level
    except BaseAppError as e:
        print_error(err, str(e))
        return int(e.exit_code)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        return int(run(args.directory, container, stdin=sys.stdin))
    except BaseAppError as e:
        print_error(err, str(e))
        return int(e.exit_code)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
