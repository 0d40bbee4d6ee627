"""
Dependency injection container for managing application dependencies.
"""

import logging

from cdl.adapters.listing.ls_command_adapter import LsCommandAdapter
from cdl.adapters.navigation.local_directory_navigator import LocalDirectoryNavigator
from cdl.adapters.terminal.shell_terminal_adapter import ShellTerminalAdapter
from cdl.config.settings import Settings
from cdl.ports.listing.listing_source_port import ListingSourcePort
from cdl.ports.navigation.directory_navigator_port import DirectoryNavigatorPort
from cdl.ports.terminal.terminal_port import TerminalPort
from cdl.use_cases.listing.print_listing import PrintListingUseCase
from cdl.use_cases.listing.strategies import (
    AdaptiveListingStrategy,
    PassthroughListingStrategy,
)
from cdl.use_cases.navigation.change_directory import ChangeDirectoryUseCase
from cdl.use_cases.navigation.resolve_target_directory import (
    ResolveTargetDirectoryUseCase,
)


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self):
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_settings(self) -> Settings:
        """
        Get application settings, read from the environment on first use.

        Returns:
            Settings instance

        Raises:
            ConfigurationError: If an environment value is invalid
        """
        if "settings" not in self._instances:
            self._instances["settings"] = Settings()
        return self._instances["settings"]

    def get_listing_source(self) -> ListingSourcePort:
        """
        Get listing source adapter instance.

        Returns:
            ListingSourcePort implementation
        """
        if "listing_source" not in self._instances:
            settings = self.get_settings()
            self._instances["listing_source"] = LsCommandAdapter(
                command=settings.ls_command,
                timeout=settings.ls_timeout,
                logger=self._logger,
            )
        return self._instances["listing_source"]

    def get_terminal(self) -> TerminalPort:
        if "terminal" not in self._instances:
            self._instances["terminal"] = ShellTerminalAdapter(self._logger)
        return self._instances["terminal"]

    def get_navigator(self) -> DirectoryNavigatorPort:
        if "navigator" not in self._instances:
            self._instances["navigator"] = LocalDirectoryNavigator(self._logger)
        return self._instances["navigator"]

    def get_resolve_target_use_case(self) -> ResolveTargetDirectoryUseCase:
        """
        Get resolve target directory use case with injected dependencies.

        Returns:
            Configured ResolveTargetDirectoryUseCase
        """
        if "resolve_target_use_case" not in self._instances:
            self._instances["resolve_target_use_case"] = ResolveTargetDirectoryUseCase(
                self.get_navigator(), self._logger
            )
        return self._instances["resolve_target_use_case"]

    def get_change_directory_use_case(self) -> ChangeDirectoryUseCase:
        """
        Get change directory use case with injected dependencies.

        Returns:
            Configured ChangeDirectoryUseCase
        """
        if "change_directory_use_case" not in self._instances:
            self._instances["change_directory_use_case"] = ChangeDirectoryUseCase(
                self.get_navigator(), self._logger
            )
        return self._instances["change_directory_use_case"]

    def get_print_listing_use_case(self) -> PrintListingUseCase:
        """
        Get print listing use case with both strategies wired to the same source.

        Returns:
            Configured PrintListingUseCase
        """
        if "print_listing_use_case" not in self._instances:
            source = self.get_listing_source()
            adaptive = AdaptiveListingStrategy(
                source, self.get_terminal(), logger=self._logger
            )
            passthrough = PassthroughListingStrategy(source)
            self._instances["print_listing_use_case"] = PrintListingUseCase(
                source, adaptive, passthrough, logger=self._logger
            )
        return self._instances["print_listing_use_case"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
