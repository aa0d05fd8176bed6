"""The local_file data source: reads a file's content."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Callable, ClassVar

from tflocal.schema import Attribute, AttributeKind, DiagnosticError, Schema
from tflocal.utils import generate_file_id

LOCAL_FILE_DATA_SOURCE_SCHEMA = Schema(
    description="Read local files",
    attributes={
        "path": Attribute(AttributeKind.STRING, "Path to the file", required=True),
        "content": Attribute(AttributeKind.STRING, "Content of the file", computed=True),
        "permissions": Attribute(
            AttributeKind.STRING,
            "File permissions (e.g., '0644')",
            optional=True,
            computed=True,
        ),
        "fail_if_absent": Attribute(
            AttributeKind.BOOL,
            "Whether to fail if the file does not exist",
            optional=True,
        ),
        "id": Attribute(AttributeKind.STRING, "Unique identifier for this file", computed=True),
    },
)


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class LocalFileDataSourceModel:
    """Configuration and result of a local_file data source."""

    path: str
    content: str | None = None
    permissions: str | None = None
    fail_if_absent: bool | None = None
    id: str | None = None


@dataclass
class LocalFileDataSource:
    """Reads a file, yielding empty content when it cannot be read unless told to fail."""

    clock: Callable[[], datetime] = _now
    schema: ClassVar[Schema] = LOCAL_FILE_DATA_SOURCE_SCHEMA

    def metadata(self, provider_type_name: str) -> str:
        """Return the type name of this data source."""
        return f"{provider_type_name}_local_file"

    def read(self, config: LocalFileDataSourceModel) -> LocalFileDataSourceModel:
        """Read the configured file and return the resulting state."""
        identifier = generate_file_id(config.path, self.clock())
        try:
            with open(config.path, "rb") as handle:
                content = handle.read().decode("utf-8", errors="surrogateescape")
        except OSError as exc:
            if config.fail_if_absent:
                raise DiagnosticError("Failed to read file", str(exc)) from exc
            content = ""
        return replace(config, id=identifier, content=content)