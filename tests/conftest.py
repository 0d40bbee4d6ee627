"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
import pytest
from unittest.mock import MagicMock

from cdl.container import DependencyContainer

BLUE = "\x1b[01;34m"
CYAN = "\x1b[01;36m"
RESET = "\x1b[0m"


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing listing operations.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        # Create some test files
        test_file1 = os.path.join(temp_dir, "test1.txt")
        test_file2 = os.path.join(temp_dir, "test2.py")

        with open(test_file1, "w") as f:
            f.write("This is a test file.")

        with open(test_file2, "w") as f:
            f.write("print('Hello, world!')")

        # Create a subdirectory with a file
        subdir = os.path.join(temp_dir, "subdir")
        os.makedirs(subdir)

        test_file3 = os.path.join(subdir, "test3.md")
        with open(test_file3, "w") as f:
            f.write("# Test Markdown\n\nThis is a test.")

        yield temp_dir


@pytest.fixture
def ls_lines():
    """
    Raw `ls -Alh` output as produced under LC_ALL=C with colors on.

    Returns:
        List of raw lines, header first
    """
    return [
        "total 24K",
        f"drwxr-xr-x 2 ncls staff 4.0K 2024-01-01 10:00 {BLUE}docs{RESET}",
        f"drwxr-xr-x 3 ncls staff 4.0K 2024-01-02 11:30 {BLUE}my projects{RESET}",
        "-rw-r--r-- 1 ncls staff  120 2024-01-03 09:15 notes.txt",
        f"lrwxrwxrwx 1 ncls staff   11 2024-01-04 08:00 {CYAN}latest{RESET} -> docs/v2.txt",
    ]


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def dependency_container(mock_logger):
    """
    Create a dependency container with mocked dependencies for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer()
    # Replace the logger with our mock
    container._logger = mock_logger
    return container
