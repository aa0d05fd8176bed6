"""Local files and shell commands managed as provider resources and data sources."""

__version__ = "0.1.0"