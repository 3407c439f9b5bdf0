"""Command runner for coordinating CLI execution.

Manages logging configuration and error handling for command execution.
"""

from __future__ import annotations

from typing import Protocol

import click

from SearchSieve.config import AppConfig
from SearchSieve.utils.log import configure_logging, log


class Command(Protocol):
    def execute(self) -> str:
        ...


class CommandRunner:
    """Runs one command with logging set up and failures reported."""

    def __init__(self, config: AppConfig) -> None:
        """Initialize command runner.

        Args:
            config: Application configuration.
        """
        self.config = config

    def run(self, command: Command, command_name: str) -> str:
        """Execute a command and return its output.

        Args:
            command: Command to execute.
            command_name: The CLI command name (e.g., 'extract').

        Returns:
            Text the command produced.

        Raises:
            click.Abort: When the command fails.
        """
        configure_logging(
            level=self.config.runtime.level,
            command_name=command_name,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
        try:
            return command.execute()
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("%s failed: %s", command_name.capitalize(), e)
            raise click.Abort from e
