"""The provider that exposes the local file and command objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, ClassVar

from tflocal.exec_data_source import LocalExecDataSource
from tflocal.exec_resource import LocalExecResource
from tflocal.file_data_source import LocalFileDataSource
from tflocal.file_resource import LocalFileResource
from tflocal.schema import PROVIDER_SCHEMA, Schema

TYPE_NAME = "tf"


@dataclass
class LocalProvider:
    """Provider for managing local files and executing local commands."""

    version: str
    schema: ClassVar[Schema] = PROVIDER_SCHEMA

    def metadata(self) -> tuple[str, str]:
        """Return the provider's type name and version."""
        return TYPE_NAME, self.version

    def resources(self) -> list[Callable[[], object]]:
        """Return factories for the provider's resources."""
        return [LocalExecResource, LocalFileResource]

    def data_sources(self) -> list[Callable[[], object]]:
        """Return factories for the provider's data sources."""
        return [LocalExecDataSource, LocalFileDataSource]

    def functions(self) -> list[Callable[[], object]]:
        """Return factories for the provider's functions; there are none."""
        return []


def new(version: str) -> Callable[[], LocalProvider]:
    """Return a factory that builds a provider of the given version."""

    def factory() -> LocalProvider:
        return LocalProvider(version=version)

    return factory