"""Starting the command of a selected item."""

from __future__ import annotations

import logging
import shlex
import subprocess

logger = logging.getLogger(__name__)


class SubprocessLauncher:
    """Runs commands as detached child processes.

    Satisfies the CommandExecutor protocol structurally.
    """

    def execute(self, command: str) -> None:
        """Start ``command`` without waiting for it.

        Failures are logged; the caller has already moved on.
        """
        try:
            args = shlex.split(command)
        except ValueError:
            logger.exception("Cannot parse command line %r", command)
            return
        if not args:
            logger.warning("Ignoring empty command")
            return

        try:
            subprocess.Popen(
                args,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError:
            logger.exception("Failed to launch %r", command)
