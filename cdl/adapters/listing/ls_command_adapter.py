"""
`ls` command adapter implementation for directory listings.
"""

import logging
import os
import shutil
import subprocess
from typing import Optional

from typing_extensions import override

from cdl.exceptions import ListingError
from cdl.ports.listing.listing_source_port import ListingSourcePort

# Flags for the rich listing. LC_ALL=C is forced alongside them so that
# dates and sizes come out in the layout the parser expects.
LONG_LISTING_ARGS = [
    "-Alh",
    "--group-directories-first",
    "--time-style=+%Y-%m-%d %H:%M",
    "--color=always",
]
PLAIN_LISTING_ARGS = ["-AlhG"]
PROBE_ARGS = ["--group-directories-first", "--version"]


class LsCommandAdapter(ListingSourcePort):
    """Runs GNU `ls` (preferring `gls` on macOS) or falls back to the system `ls`."""

    def __init__(
        self,
        command: Optional[str] = None,
        timeout: float = 15.0,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the adapter.

        Args:
            command: Explicit listing binary. If None, `gls` is used when found on PATH, else `ls`.
            timeout: Seconds allowed for each `ls` run
            logger: Logger instance to use for logging
        """
        self._command = command
        self._timeout = timeout
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._rich: Optional[bool] = None

    @property
    def command(self) -> str:
        """The listing binary in use, resolved on first access."""
        if self._command is None:
            self._command = "gls" if shutil.which("gls") else "ls"
            self._logger.debug(f"Using listing command: {self._command}")
        return self._command

    @override
    def supports_rich_listing(self) -> bool:
        if self._rich is None:
            try:
                proc = subprocess.run(
                    [self.command, *PROBE_ARGS],
                    capture_output=True,
                    timeout=self._timeout,
                    check=False,
                )
                self._rich = proc.returncode == 0
            except (OSError, subprocess.SubprocessError) as e:
                self._logger.warning(f"Could not probe {self.command}: {e}")
                self._rich = False
            self._logger.debug(f"GNU flags supported by {self.command}: {self._rich}")
        return self._rich

    def _run(
        self, args: list[str], directory: str, env: Optional[dict[str, str]] = None
    ) -> str:
        """
        Run the listing binary in a directory and return its standard output.

        Raises:
            ListingError: If the binary cannot be run or produces nothing but an error
        """
        cmd = [self.command, *args]
        try:
            proc = subprocess.run(
                cmd,
                cwd=directory,
                env=env,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="surrogateescape",
                timeout=self._timeout,
                check=False,
            )
        except FileNotFoundError:
            raise ListingError(f"Listing command not found: {self.command}")
        except subprocess.TimeoutExpired:
            raise ListingError(
                f"Listing command timed out after {self._timeout:g}s: {self.command}"
            )
        except OSError as e:
            raise ListingError(f"Failed to run {self.command}: {e}")

        if proc.returncode != 0:
            message = proc.stderr.strip() or f"exit status {proc.returncode}"
            if not proc.stdout:
                raise ListingError(f"Failed to list {directory}: {message}")
            # ls exits 1 for minor problems (e.g. one unreadable entry); keep what it printed.
            self._logger.warning(f"{self.command} reported: {message}")
        return proc.stdout

    @override
    def long_listing(self, directory: str) -> list[str]:
        env = {**os.environ, "LC_ALL": "C"}
        output = self._run(LONG_LISTING_ARGS, directory, env=env).rstrip("\n")
        # Records end with "\n" only; other line breaks can be part of a name.
        return output.split("\n") if output else []

    @override
    def plain_listing(self, directory: str) -> str:
        return self._run(PLAIN_LISTING_ARGS, directory)
