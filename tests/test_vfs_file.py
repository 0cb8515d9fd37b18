import io

import pytest

from vbanext.vfs_file import AccessHint, FileAccess, VfsFile, Whence


@pytest.fixture
def sample(tmp_path):
    path = tmp_path / "sample.bin"
    path.write_bytes(b"hello world")
    return path


def test_write_then_read_round_trip(tmp_path):
    path = tmp_path / "out.bin"
    payload = b"\x00\x01binary\xff"
    with VfsFile(path, FileAccess.WRITE) as handle:
        assert handle.write(payload) == len(payload)
        assert handle.size == len(payload)
    with VfsFile(path, FileAccess.READ) as handle:
        assert handle.size == len(payload)
        assert handle.read(len(payload) + 10) == payload


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        VfsFile(tmp_path / "missing.bin", FileAccess.READ)


def test_update_existing_requires_existing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        VfsFile(tmp_path / "missing.bin", FileAccess.READ_WRITE | FileAccess.UPDATE_EXISTING)


@pytest.mark.parametrize(
    "mode",
    [0, FileAccess.UPDATE_EXISTING, FileAccess.READ | FileAccess.UPDATE_EXISTING, 99],
)
def test_unsupported_modes_raise(sample, mode):
    with pytest.raises(ValueError):
        VfsFile(sample, mode)


def test_update_existing_keeps_contents(sample):
    with VfsFile(sample, FileAccess.WRITE | FileAccess.UPDATE_EXISTING) as handle:
        assert handle.size == len(b"hello world")
        handle.write(b"J")
        assert handle.size == len(b"hello world")
    assert sample.read_bytes() == b"Jello world"


def test_read_write_truncates(sample):
    with VfsFile(sample, FileAccess.READ_WRITE) as handle:
        assert handle.size == 0
        handle.write(b"abc")
        handle.seek(0)
        assert handle.read(3) == b"abc"
    assert sample.read_bytes() == b"abc"


def test_seek_and_tell(sample):
    with VfsFile(sample, FileAccess.READ) as handle:
        assert handle.seek(6) == 6
        assert handle.tell() == 6
        assert handle.read(5) == b"world"
        handle.seek(-5, Whence.END)
        assert handle.read(5) == b"world"
        handle.seek(0)
        handle.seek(2, Whence.CUR)
        assert handle.read(3) == b"llo"


def test_write_past_end_grows_size(sample):
    with VfsFile(sample, FileAccess.READ_WRITE | FileAccess.UPDATE_EXISTING) as handle:
        handle.seek(0, Whence.END)
        handle.write(b"!!")
        assert handle.size == len(b"hello world!!")
    assert sample.read_bytes() == b"hello world!!"


def test_truncate_updates_size(sample):
    with VfsFile(sample, FileAccess.READ_WRITE | FileAccess.UPDATE_EXISTING) as handle:
        assert handle.truncate(5) == 5
        assert handle.size == 5
    assert sample.read_bytes() == b"hello"


def test_frequent_access_read_is_mapped(sample):
    with VfsFile(sample, FileAccess.READ, AccessHint.FREQUENT_ACCESS) as handle:
        assert handle.mapped
        assert handle.hints == AccessHint.FREQUENT_ACCESS
        assert handle.read(5) == b"hello"
        assert handle.tell() == 5
        assert handle.seek(1, Whence.CUR) == 6
        assert handle.read(100) == b"world"
        assert handle.read(4) == b""


def test_mapped_seek_rules(sample):
    size = len(b"hello world")
    with VfsFile(sample, FileAccess.READ, AccessHint.FREQUENT_ACCESS) as handle:
        with pytest.raises(ValueError):
            handle.seek(-1, Whence.SET)
        with pytest.raises(ValueError):
            handle.seek(-1, Whence.END)
        with pytest.raises(ValueError):
            handle.seek(-1, Whence.CUR)
        assert handle.seek(3, Whence.END) == size + 3
        with pytest.raises(ValueError):
            handle.read(1)


def test_mapped_file_is_read_only(sample):
    with VfsFile(sample, FileAccess.READ, AccessHint.FREQUENT_ACCESS) as handle:
        with pytest.raises(io.UnsupportedOperation):
            handle.write(b"x")
        with pytest.raises(io.UnsupportedOperation):
            handle.truncate(0)
    assert sample.read_bytes() == b"hello world"


def test_frequent_hint_dropped_for_writable_modes(sample):
    with VfsFile(
        sample, FileAccess.READ_WRITE | FileAccess.UPDATE_EXISTING, AccessHint.FREQUENT_ACCESS
    ) as handle:
        assert not handle.mapped
        assert handle.hints == AccessHint.NONE
        assert handle.read(5) == b"hello"


def test_empty_file_falls_back_to_stream(tmp_path):
    path = tmp_path / "empty.bin"
    path.write_bytes(b"")
    with VfsFile(path, FileAccess.READ, AccessHint.FREQUENT_ACCESS) as handle:
        assert not handle.mapped
        assert handle.size == 0
        assert handle.read(8) == b""


def test_context_manager_closes(sample):
    with VfsFile(sample, FileAccess.READ) as handle:
        assert not handle.closed
    assert handle.closed
    with pytest.raises(ValueError):
        handle.read(1)
    handle.close()
    assert handle.closed


def test_path_and_error_flag(sample):
    with VfsFile(sample, FileAccess.READ) as handle:
        handle.read(3)
        handle.flush()
        assert handle.path == str(sample)
        assert handle.error() is False


def test_negative_read_length_rejected(sample):
    with VfsFile(sample, FileAccess.READ) as handle:
        with pytest.raises(ValueError):
            handle.read(-1)