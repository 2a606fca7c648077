import pytest

from ninjalite.disk_interface import (
    DiskInterface,
    RealDiskInterface,
    StatError,
    dir_name,
)


@pytest.fixture
def disk(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return RealDiskInterface()


def touch(path):
    with open(path, "w"):
        pass


def test_stat_missing_file(disk):
    assert disk.stat("nosuchfile") == 0
    assert disk.stat("nosuchdir/nosuchfile") == 0
    touch("notadir")
    assert disk.stat("notadir/nosuchfile") == 0


def test_stat_bad_path(disk):
    with pytest.raises(StatError) as info:
        disk.stat("x" * 512)
    assert "stat(" in str(info.value)


def test_stat_existing_file(disk):
    touch("file")
    assert disk.stat("file") > 1


def test_stat_existing_dir(disk):
    disk.make_dir("subdir")
    disk.make_dir("subdir/subsubdir")
    assert disk.stat("..") > 1
    assert disk.stat(".") > 1
    assert disk.stat("subdir") > 1
    assert disk.stat("subdir/subsubdir") > 1

    assert disk.stat("subdir") == disk.stat("subdir/.")
    assert disk.stat("subdir") == disk.stat("subdir/subsubdir/..")
    assert disk.stat("subdir/subsubdir") == disk.stat("subdir/subsubdir/.")


def test_make_dir_existing_is_not_an_error(disk):
    disk.make_dir("d")
    disk.make_dir("d")
    assert disk.stat("d") > 1


def test_read_file(disk):
    with pytest.raises(FileNotFoundError):
        disk.read_file("foobar")

    content = "test content\nok"
    with open("testfile", "wb") as handle:
        handle.write(content.encode())
    assert disk.read_file("testfile") == content


def test_write_then_read_round_trip(disk):
    disk.write_file("out.txt", "line one\r\nline two\n")
    assert disk.read_file("out.txt") == "line one\r\nline two\n"


def test_make_dirs(disk):
    path = "path/with/double//slash/"
    disk.make_dirs(path)
    with open(path + "a_file", "w"):
        pass
    assert disk.stat(path + "a_file") > 1


def test_remove_file(disk):
    touch("file-to-remove")
    assert disk.remove_file("file-to-remove") is True
    assert disk.remove_file("file-to-remove") is False
    assert disk.remove_file("does not exist") is False


def test_remove_directory_fails(disk):
    disk.make_dir("dir")
    with pytest.raises(OSError):
        disk.remove_file("dir")


@pytest.mark.parametrize(
    "path, expected",
    [
        ("foo", ""),
        ("a/b", "a"),
        ("a//b", "a"),
        ("path/with/double//slash/", "path/with/double//slash"),
        ("/foo", ""),
    ],
)
def test_dir_name(path, expected):
    assert dir_name(path) == expected


class FakeDisk(DiskInterface):
    def __init__(self, mtimes=None, failing=()):
        self.mtimes = dict(mtimes or {})
        self.failing = set(failing)
        self.made = []
        self.stats = []

    def stat(self, path):
        self.stats.append(path)
        if path in self.failing:
            raise StatError(f"stat({path}): failure")
        return self.mtimes.get(path, 0)

    def make_dir(self, path):
        self.made.append(path)
        self.mtimes[path] = 1

    def write_file(self, path, contents):
        self.mtimes[path] = 1

    def read_file(self, path):
        raise FileNotFoundError(path)

    def remove_file(self, path):
        return self.mtimes.pop(path, None) is not None


def test_make_dirs_creates_parents_in_order():
    fake = FakeDisk()
    DiskInterface.make_dirs(fake, "a/b/c/file")
    assert fake.made == ["a", "a/b", "a/b/c"]


def test_make_dirs_stops_at_existing_directory():
    fake = FakeDisk(mtimes={"a": 5})
    DiskInterface.make_dirs(fake, "a/b/file")
    assert fake.made == ["a/b"]
    assert fake.stats == ["a/b", "a"]


def test_make_dirs_without_directory_does_nothing():
    fake = FakeDisk()
    DiskInterface.make_dirs(fake, "file")
    assert fake.made == []
    assert fake.stats == []


def test_make_dirs_propagates_stat_error():
    fake = FakeDisk(failing={"a/b"})
    with pytest.raises(StatError):
        DiskInterface.make_dirs(fake, "a/b/file")
    assert fake.made == []