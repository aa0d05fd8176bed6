"""The local_exec resource: runs a shell command and records its output."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Callable, ClassVar

from tflocal.schema import Attribute, AttributeKind, DiagnosticError, Schema
from tflocal.utils import generate_exec_id

LOCAL_EXEC_RESOURCE_SCHEMA = Schema(
    description="Execute local commands with potential side effects",
    attributes={
        "command": Attribute(AttributeKind.STRING, "Command to execute", required=True),
        "output": Attribute(AttributeKind.STRING, "Output of the command", computed=True),
        "exit_code": Attribute(AttributeKind.INT64, "Exit code of the command", computed=True),
        "fail_if_nonzero": Attribute(
            AttributeKind.BOOL,
            "Whether to fail if the command returns a non-zero exit code. "
            "Defaults to true if not specified.",
            optional=True,
            computed=True,
            default=True,
        ),
        "on_destroy": Attribute(
            AttributeKind.STRING,
            "Command to execute when the resource is destroyed",
            optional=True,
        ),
        "id": Attribute(AttributeKind.STRING, "Unique identifier for this execution", computed=True),
    },
)


class CommandError(Exception):
    """A command could not be run or exited with a non-zero code."""

    def __init__(self, message: str, output: str = "", exit_code: int = 0) -> None:
        super().__init__(message)
        self.output = output
        self.exit_code = exit_code


def execute_local_command(command: str, fail_if_nonzero: bool) -> tuple[str, int]:
    """Run ``command`` with ``sh -c`` and return its combined output and exit code."""
    if not command:
        raise CommandError("empty command")
    try:
        completed = subprocess.run(
            ["sh", "-c", command],
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            check=False,
        )
    except OSError as exc:
        raise CommandError(f"failed to execute command: {exc}") from exc

    output = completed.stdout.decode("utf-8", errors="replace")
    # A process ended by a signal reports -1.
    exit_code = completed.returncode if completed.returncode >= 0 else -1
    if exit_code != 0 and fail_if_nonzero:
        raise CommandError(
            f"command exited with code {exit_code}: {output}", output, exit_code
        )
    return output, exit_code


def _run(command: str, fail_if_nonzero: bool, summary: str) -> tuple[str, int]:
    try:
        return execute_local_command(command, fail_if_nonzero)
    except CommandError as exc:
        raise DiagnosticError(summary, str(exc)) from exc


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class LocalExecModel:
    """State of a local_exec resource."""

    command: str
    output: str | None = None
    exit_code: int | None = None
    fail_if_nonzero: bool = True
    on_destroy: str | None = None
    id: str | None = None


@dataclass
class LocalExecResource:
    """Runs a command on create and update, and an optional one on delete."""

    clock: Callable[[], datetime] = _now
    schema: ClassVar[Schema] = LOCAL_EXEC_RESOURCE_SCHEMA

    def metadata(self, provider_type_name: str) -> str:
        """Return the type name of this resource."""
        return f"{provider_type_name}_local_exec"

    def create(self, plan: LocalExecModel) -> LocalExecModel:
        """Run the planned command and return the new state."""
        identifier = generate_exec_id(plan.command, self.clock())
        output, exit_code = _run(plan.command, plan.fail_if_nonzero, "Command execution failed")
        return replace(plan, output=output, exit_code=exit_code, id=identifier)

    def read(self, state: LocalExecModel) -> LocalExecModel:
        """Return the stored state; the command is not run again."""
        return replace(state)

    def update(self, state: LocalExecModel, plan: LocalExecModel) -> LocalExecModel:
        """Run the planned command, keeping the identifier of the current state."""
        output, exit_code = _run(plan.command, plan.fail_if_nonzero, "Command execution failed")
        return replace(plan, output=output, exit_code=exit_code, id=state.id)

    def delete(self, state: LocalExecModel) -> None:
        """Run the on_destroy command, if one is set."""
        if state.on_destroy is not None:
            _run(state.on_destroy, state.fail_if_nonzero, "Failed to execute destroy command")