"""The local_file resource: writes a file and keeps it in step with its content."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Callable, ClassVar

from tflocal.schema import Attribute, AttributeKind, DiagnosticError, Schema
from tflocal.utils import generate_file_id

LOCAL_FILE_RESOURCE_SCHEMA = Schema(
    description="Manage local files with potential side effects",
    attributes={
        "path": Attribute(AttributeKind.STRING, "Path to the file", required=True),
        "content": Attribute(AttributeKind.STRING, "Content of the file", required=True),
        "permissions": Attribute(
            AttributeKind.STRING,
            "File permissions (e.g., '0644')",
            optional=True,
            computed=True,
            default="0644",
        ),
        "fail_if_absent": Attribute(
            AttributeKind.BOOL,
            "Whether to fail if the file does not exist",
            optional=True,
        ),
        "delete_on_destroy": Attribute(
            AttributeKind.BOOL,
            "Whether to delete the file when the resource is destroyed. Defaults to true.",
            optional=True,
            computed=True,
            default=True,
        ),
        "id": Attribute(AttributeKind.STRING, "Unique identifier for this file", computed=True),
    },
)

_DIR_MODE = 0o755
_FILE_MODE = 0o644


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _write(path: str, content: str, summary: str) -> None:
    directory = os.path.dirname(path) or "."
    try:
        os.makedirs(directory, mode=_DIR_MODE, exist_ok=True)
    except OSError as exc:
        raise DiagnosticError("Failed to create directory", str(exc)) from exc
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, _FILE_MODE)
        with os.fdopen(fd, "wb") as handle:
            handle.write(content.encode("utf-8", errors="surrogateescape"))
    except OSError as exc:
        raise DiagnosticError(summary, str(exc)) from exc


def _remove(path: str) -> None:
    """Remove a file or an empty directory; a missing path is not an error."""
    try:
        os.remove(path)
        return
    except FileNotFoundError:
        return
    except OSError as exc:
        first_error = exc
    try:
        os.rmdir(path)
    except FileNotFoundError:
        return
    except OSError:
        raise first_error from None


@dataclass
class LocalFileModel:
    """State of a local_file resource."""

    path: str
    content: str
    permissions: str = "0644"
    fail_if_absent: bool | None = None
    delete_on_destroy: bool = True
    id: str | None = None


@dataclass
class LocalFileResource:
    """Writes a file on create and update, and removes it on delete."""

    clock: Callable[[], datetime] = _now
    schema: ClassVar[Schema] = LOCAL_FILE_RESOURCE_SCHEMA

    def metadata(self, provider_type_name: str) -> str:
        """Return the type name of this resource."""
        return f"{provider_type_name}_local_file"

    def create(self, plan: LocalFileModel) -> LocalFileModel:
        """Write the planned file, creating parent directories, and return the new state."""
        identifier = generate_file_id(plan.path, self.clock())
        _write(plan.path, plan.content, "Failed to write file")
        return replace(plan, id=identifier)

    def read(self, state: LocalFileModel) -> LocalFileModel | None:
        """Refresh the content from disk; return None if the file is gone."""
        try:
            with open(state.path, "rb") as handle:
                data = handle.read()
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise DiagnosticError("Failed to read file", str(exc)) from exc
        return replace(state, content=data.decode("utf-8", errors="surrogateescape"))

    def update(self, state: LocalFileModel, plan: LocalFileModel) -> LocalFileModel:
        """Rewrite the file from the plan, keeping the identifier of the current state."""
        _write(plan.path, plan.content, "Failed to update file")
        return replace(plan, id=state.id)

    def delete(self, state: LocalFileModel) -> None:
        """Remove the file unless delete_on_destroy is false."""
        if not state.delete_on_destroy:
            return
        try:
            _remove(state.path)
        except OSError as exc:
            raise DiagnosticError("Failed to delete file", str(exc)) from exc