from abc import ABC, abstractmethod


class TerminalPort(ABC):
    @abstractmethod
    def width(self) -> int:
        """
        Get the terminal width in columns.

        Returns:
            A positive width, falling back to a default when unknown
        """
        pass
