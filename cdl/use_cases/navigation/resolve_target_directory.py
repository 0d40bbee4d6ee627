"""
Use case for choosing which directory to enter.
"""

import logging
from typing import Optional, TextIO

from cdl.ports.navigation.directory_navigator_port import DirectoryNavigatorPort


class ResolveTargetDirectoryUseCase:
    """Pick the target directory from an argument, piped stdin, or the home directory."""

    def __init__(
        self,
        navigator: DirectoryNavigatorPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            navigator: Navigator providing the home directory fallback
            logger: Logger instance to use for logging
        """
        self._navigator = navigator
        self._logger = logger or logging.getLogger(__name__)

    @staticmethod
    def read_first_line(stream: TextIO) -> Optional[str]:
        """
        Read the first non-empty line from a stream.

        Args:
            stream: Text stream to read from

        Returns:
            The line with surrounding whitespace trimmed, or None if the stream has none
        """
        for line in stream:
            line = line.strip()
            if line:
                return line
        return None

    def execute(
        self, argument: Optional[str] = None, stdin: Optional[TextIO] = None
    ) -> str:
        """
        Resolve the target directory.

        An explicit argument wins. Otherwise, if stdin is piped (not a TTY),
        its first non-empty line is used. Otherwise the home directory.

        Args:
            argument: Directory given on the command line, if any
            stdin: Standard input stream, if it may be consulted

        Returns:
            The directory to change into
        """
        if argument:
            self._logger.debug(f"Target from argument: {argument}")
            return argument

        if stdin is not None and not stdin.isatty():
            target = self.read_first_line(stdin)
            if target:
                self._logger.debug(f"Target from stdin: {target}")
                return target

        home = self._navigator.home_directory()
        self._logger.debug(f"Target defaults to home: {home}")
        return home
