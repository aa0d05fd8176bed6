"""The local_exec data source: runs a shell command each time it is read."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Callable, ClassVar

from tflocal.exec_resource import CommandError, execute_local_command
from tflocal.schema import Attribute, AttributeKind, DiagnosticError, Schema
from tflocal.utils import generate_exec_id

LOCAL_EXEC_DATA_SOURCE_SCHEMA = Schema(
    description="Execute local commands",
    attributes={
        "command": Attribute(AttributeKind.STRING, "Command to execute", required=True),
        "output": Attribute(AttributeKind.STRING, "Output of the command", computed=True),
        "exit_code": Attribute(AttributeKind.INT64, "Exit code of the command", computed=True),
        "fail_if_nonzero": Attribute(
            AttributeKind.BOOL,
            "Whether to fail if the command returns a non-zero exit code",
            optional=True,
        ),
        "id": Attribute(AttributeKind.STRING, "Unique identifier for this execution", computed=True),
    },
)


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class LocalExecDataSourceModel:
    """Configuration and result of a local_exec data source."""

    command: str
    output: str | None = None
    exit_code: int | None = None
    fail_if_nonzero: bool | None = None
    id: str | None = None


@dataclass
class LocalExecDataSource:
    """Runs a command and reports its output and exit code."""

    clock: Callable[[], datetime] = _now
    schema: ClassVar[Schema] = LOCAL_EXEC_DATA_SOURCE_SCHEMA

    def metadata(self, provider_type_name: str) -> str:
        """Return the type name of this data source."""
        return f"{provider_type_name}_local_exec"

    def read(self, config: LocalExecDataSourceModel) -> LocalExecDataSourceModel:
        """Run the configured command and return the resulting state."""
        fail_if_nonzero = True if config.fail_if_nonzero is None else config.fail_if_nonzero
        identifier = generate_exec_id(config.command, self.clock())
        try:
            output, exit_code = execute_local_command(config.command, fail_if_nonzero)
        except CommandError as exc:
            raise DiagnosticError("Command execution failed", str(exc)) from exc
        return replace(
            config,
            fail_if_nonzero=fail_if_nonzero,
            id=identifier,
            output=output,
            exit_code=exit_code,
        )