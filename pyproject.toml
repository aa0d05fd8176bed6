[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tflocal"
version = "0.1.0"
description = "Manage local files and run local shell commands as declarative resources and data sources"
requires-python = ">=3.10"
dependencies = []
keywords = ["infrastructure", "local-exec", "local-file", "provisioning", "shell"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tflocal"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
