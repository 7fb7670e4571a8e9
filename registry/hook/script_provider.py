"""
Registry Hooks - Script Provider
==================================
Runs an external script for every handled event.

Invocation:
    <script_path> <EVENT_TYPE> <field value> <field value> ...

Field values follow vocabulary declaration order, so a CREATE_BUCKET
event calls `script CREATE_BUCKET <bucket id> <user>`.
"""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path
from typing import Iterable, Optional

from registry.hook.errors import ProviderCreationError, ScriptExecutionError
from registry.hook.event import Event
from registry.hook.event_field import FIELD_ORDER
from registry.hook.event_type import EventType
from registry.hook.provider import EventHookProvider

logger = logging.getLogger("registry.hook")


class ScriptEventHookProvider(EventHookProvider):
    """Hands each event to an executable script."""

    def __init__(
        self,
        script_path: str | os.PathLike,
        working_directory: str | os.PathLike | None = None,
        whitelisted_event_types: Optional[Iterable[EventType | str]] = None,
        timeout: float | None = None,
    ) -> None:
        super().__init__(whitelisted_event_types)
        name = type(self).__name__

        if not script_path:
            raise ProviderCreationError(name, "a script path is required.")
        script = Path(script_path)
        if not script.is_file():
            raise ProviderCreationError(name, f"script '{script}' does not exist.")
        if not os.access(script, os.X_OK):
            raise ProviderCreationError(name, f"script '{script}' is not executable.")

        workdir = Path(working_directory) if working_directory else None
        if workdir is not None and not workdir.is_dir():
            raise ProviderCreationError(
                name, f"working directory '{workdir}' does not exist."
            )

        self._script = script.resolve()
        self._working_directory = workdir
        self._timeout = timeout

    @property
    def script_path(self) -> Path:
        return self._script

    def build_command(self, event: Event) -> list[str]:
        fields = sorted(event.fields, key=lambda f: FIELD_ORDER[f.name])
        return [str(self._script), event.event_type.value] + [f.value for f in fields]

    def handle(self, event: Event) -> None:
        command = self.build_command(event)
        logger.debug(f"Running hook script: {command}")

        completed = subprocess.run(
            command,
            cwd=self._working_directory,
            capture_output=True,
            text=True,
            timeout=self._timeout,
            check=False,
        )
        if completed.returncode != 0:
            raise ScriptExecutionError(
                str(self._script), completed.returncode, completed.stderr
            )
