import logging
import shutil
from typing import Optional

from typing_extensions import override

from cdl.formatting.constants import DEFAULT_TERMINAL_WIDTH
from cdl.ports.terminal.terminal_port import TerminalPort


class ShellTerminalAdapter(TerminalPort):
    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    @override
    def width(self) -> int:
        # Honors $COLUMNS, then the size of stdout's terminal.
        columns = shutil.get_terminal_size(fallback=(DEFAULT_TERMINAL_WIDTH, 24)).columns
        if columns <= 0:
            self._logger.debug(
                f"Unusable terminal width {columns}, using {DEFAULT_TERMINAL_WIDTH}"
            )
            return DEFAULT_TERMINAL_WIDTH
        return columns
