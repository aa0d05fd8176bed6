import os
import stat
from datetime import datetime, timezone

import pytest

from tflocal.file_resource import LocalFileModel, LocalFileResource
from tflocal.schema import DiagnosticError
from tflocal.utils import generate_file_id

FIXED = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def resource():
    return LocalFileResource(clock=lambda: FIXED)


def test_metadata(resource):
    assert resource.metadata("tf") == "tf_local_file"


def test_schema_defaults(resource):
    assert resource.schema.attribute("permissions").default == "0644"
    assert resource.schema.attribute("delete_on_destroy").default is True
    assert resource.schema.attribute("content").required


def test_create_basic_file(resource, tmp_path):
    path = str(tmp_path / "test.txt")
    state = resource.create(LocalFileModel(path=path, content="hello world"))
    assert state.path == path
    assert state.content == "hello world"
    assert state.permissions == "0644"
    assert (tmp_path / "test.txt").read_text() == "hello world"
    assert state.id == generate_file_id(path, FIXED)


def test_create_keeps_given_permissions(resource, tmp_path):
    path = str(tmp_path / "test_perms.txt")
    state = resource.create(
        LocalFileModel(path=path, content="secure content", permissions="0600")
    )
    assert state.content == "secure content"
    assert state.permissions == "0600"
    mode = stat.S_IMODE(os.stat(path).st_mode)
    assert mode & ~0o644 == 0


def test_create_nested_directories(resource, tmp_path):
    path = str(tmp_path / "nested" / "dir" / "test.txt")
    state = resource.create(LocalFileModel(path=path, content="nested file content"))
    assert state.path == path
    assert (tmp_path / "nested" / "dir" / "test.txt").read_text() == "nested file content"


def test_create_multiline_then_update(resource, tmp_path):
    path = str(tmp_path / "test_write.txt")
    state = resource.create(
        LocalFileModel(
            path=path,
            content="Hello from Terraform!\nThis is a test file.",
            permissions="0644",
        )
    )
    assert (tmp_path / "test_write.txt").read_text() == "Hello from Terraform!\nThis is a test file."
    later = LocalFileResource(clock=lambda: datetime(2030, 1, 1, tzinfo=timezone.utc))
    updated = later.update(
        state,
        LocalFileModel(
            path=path,
            content="Updated content!\nThe file has been modified.",
            permissions="0644",
        ),
    )
    assert updated.content == "Updated content!\nThe file has been modified."
    assert updated.permissions == "0644"
    assert updated.id == state.id
    assert (tmp_path / "test_write.txt").read_text() == "Updated content!\nThe file has been modified."


def test_update_basic_content(resource, tmp_path):
    path = str(tmp_path / "test.txt")
    state = resource.create(LocalFileModel(path=path, content="hello world"))
    updated = resource.update(state, LocalFileModel(path=path, content="updated content"))
    assert updated.content == "updated content"
    assert (tmp_path / "test.txt").read_text() == "updated content"


def test_read_refreshes_content(resource, tmp_path):
    path = tmp_path / "test.txt"
    state = resource.create(LocalFileModel(path=str(path), content="hello world"))
    path.write_text("changed outside")
    refreshed = resource.read(state)
    assert refreshed.content == "changed outside"
    assert refreshed.id == state.id


def test_read_missing_file_removes_resource(resource, tmp_path):
    state = LocalFileModel(path=str(tmp_path / "gone.txt"), content="x", id="abc")
    assert resource.read(state) is None


def test_read_directory_fails(resource, tmp_path):
    state = LocalFileModel(path=str(tmp_path), content="x")
    with pytest.raises(DiagnosticError) as info:
        resource.read(state)
    assert info.value.summary == "Failed to read file"


def test_create_under_regular_file_fails(resource, tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    with pytest.raises(DiagnosticError) as info:
        resource.create(LocalFileModel(path=str(blocker / "sub" / "f.txt"), content="x"))
    assert info.value.summary == "Failed to create directory"


def test_update_onto_directory_fails(resource, tmp_path):
    target = tmp_path / "adir"
    target.mkdir()
    state = LocalFileModel(path=str(target), content="x", id="abc")
    with pytest.raises(DiagnosticError) as info:
        resource.update(state, LocalFileModel(path=str(target), content="y"))
    assert info.value.summary == "Failed to update file"


def test_delete_removes_file(resource, tmp_path):
    path = tmp_path / "test.txt"
    state = resource.create(LocalFileModel(path=str(path), content="hello"))
    resource.delete(state)
    assert not path.exists()


def test_delete_keeps_file_when_disabled(resource, tmp_path):
    path = tmp_path / "keep.txt"
    state = resource.create(
        LocalFileModel(path=str(path), content="keep", delete_on_destroy=False)
    )
    resource.delete(state)
    assert path.read_text() == "keep"


def test_delete_missing_file_is_quiet(resource, tmp_path):
    path = tmp_path / "absent.txt"
    resource.delete(LocalFileModel(path=str(path), content=""))
    assert not path.exists()


def test_delete_empty_directory(resource, tmp_path):
    target = tmp_path / "empty"
    target.mkdir()
    resource.delete(LocalFileModel(path=str(target), content=""))
    assert not target.exists()


def test_delete_non_empty_directory_fails(resource, tmp_path):
    target = tmp_path / "full"
    target.mkdir()
    (target / "inner.txt").write_text("x")
    with pytest.raises(DiagnosticError) as info:
        resource.delete(LocalFileModel(path=str(target), content=""))
    assert info.value.summary == "Failed to delete file"