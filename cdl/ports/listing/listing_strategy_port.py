from abc import ABC, abstractmethod


class ListingStrategyPort(ABC):
    @abstractmethod
    def render(self, directory: str) -> str:
        """
        Produce the text shown for a directory.

        Returns:
            Text ready to be written to stdout
        """
        pass
