# tflocal

`tflocal` handles two kinds of local side effects through a small
provider-style interface:

- **`local_exec`**: runs a shell command with `sh -c` and records its combined
  output (stdout and stderr together) and exit code.
- **`local_file`**: writes, reads and removes files on the local disk.

Each kind is offered as a *resource*, which has a create/read/update/delete
life cycle, and as a *data source*, which is only read.

## Installation

```
pip install .
```

Install the test extra to run the test suite:

```
pip install ".[test]"
pytest
```

## The provider

```python
from tflocal.provider import new

provider = new("1.0.0")()
provider.metadata()       # ("tf", "1.0.0")
provider.resources()      # [LocalExecResource, LocalFileResource]
provider.data_sources()   # [LocalExecDataSource, LocalFileDataSource]
provider.functions()      # []: the provider has no functions
```

Resources and data sources report their type name through
`metadata(provider_type_name)`, which appends `_local_exec` or `_local_file`,
for example `tf_local_exec`.

Each class carries a `schema` (a `tflocal.schema.Schema`) describing its
attributes: their `AttributeKind`, whether they are required, optional or
computed, and any default. `Schema.attribute(name)` looks one up and raises
`KeyError` for an unknown name.

## Running commands

```python
from tflocal.exec_resource import LocalExecResource, LocalExecModel, execute_local_command

output, exit_code = execute_local_command("echo hi", fail_if_nonzero=True)
# output == "hi\n", exit_code == 0

resource = LocalExecResource()
state = resource.create(LocalExecModel(command="echo 'hello world'"))
# state.output == "hello world\n", state.exit_code == 0, state.id is an MD5 hex digest
```

`execute_local_command` raises `CommandError` for an empty command, for a
command that cannot be started, and, when `fail_if_nonzero` is true, for a
non-zero exit status. A process ended by a signal reports exit code `-1`.

The resource and data source methods turn those failures into
`tflocal.schema.DiagnosticError`, which has a `summary` (such as
`"Command execution failed"`) and a `detail`.

`LocalExecResource`:

- `create(plan)` runs the command and returns the new state with a fresh `id`.
- `read(state)` returns a copy of the state without running anything.
- `update(state, plan)` runs the planned command and keeps the old `id`.
- `delete(state)` runs `on_destroy` if it is set.

`fail_if_nonzero` on `LocalExecModel` defaults to `True`.

`LocalExecDataSource.read(config)` runs the command each time. When
`fail_if_nonzero` is left as `None` it is treated, and recorded, as `True`.

## Managing files

```python
from tflocal.file_resource import LocalFileResource, LocalFileModel

files = LocalFileResource()
state = files.create(LocalFileModel(path="/tmp/demo/nested/hello.txt", content="hello world"))
state = files.read(state)        # content refreshed from disk; None once the file is gone
files.delete(state)              # removes the file unless delete_on_destroy is False
```

Parent directories are created as needed. `update(state, plan)` rewrites the
file and keeps the old `id`. `delete` treats a path that is already gone as
success. `permissions` defaults to `"0644"` and is recorded in the state, but
files are always written with mode `0o644` (subject to the umask).

`LocalFileDataSource.read(config)` returns the file's content. If the file
cannot be read it returns empty content, unless `fail_if_absent` is true, in
which case it raises `DiagnosticError` with the summary `"Failed to read file"`.

## Identifiers and clocks

`tflocal.utils.generate_file_id` and `generate_exec_id` hash a path or command
together with the timestamp formatted as UTC RFC 3339, to the second. The
result is a hex MD5 digest. Every resource and data source takes an optional
`clock` callable returning a `datetime`, used for these identifiers.

`parse_file_mode` reads the leading octal digits of a mode string and falls
back to `0o644`.

## What it does not do

`tflocal` is a library only. It has no command-line program and does not
serve its resources over any plugin protocol; callers drive the
create/read/update/delete methods themselves and keep the returned state.