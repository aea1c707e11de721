from __future__ import annotations

import os
import stat

import pytest

from file_utils.common.errors import (
    ArchiveIOError,
    DestinationExistsError,
    InputNotFoundError,
    TargetNotADirectoryError,
)
from file_utils.core.files import (
    copy_file_no_overwrite,
    get_jar_urls_in_directory,
    list_files_with_extension,
    require_directory,
    require_file,
    set_posix_permissions,
)


@pytest.fixture
def jar_dir(tmp_path):
    directory = tmp_path / "sampleJarDirectory"
    directory.mkdir()
    for name in ("empty1.jar", "empty2.jar", "empty3.JAR", "readme.txt", "notajar.jar.bak"):
        (directory / name).write_bytes(b"")
    (directory / "nested.jar").mkdir()
    return directory


def test_get_jar_urls_in_directory(jar_dir):
    urls = get_jar_urls_in_directory(jar_dir)

    expected = {(jar_dir / name).as_uri() for name in ("empty1.jar", "empty2.jar", "empty3.JAR")}
    assert set(urls) == expected
    assert len(urls) == 3
    assert all(url.startswith("file:") for url in urls)


def test_list_files_with_extension_is_sorted(jar_dir):
    names = [path.name for path in list_files_with_extension(jar_dir, ".jar")]
    assert names == sorted(names)


def test_jar_listing_missing_directory(tmp_path):
    with pytest.raises(InputNotFoundError, match="does not exist"):
        get_jar_urls_in_directory(tmp_path / "nope")


def test_jar_listing_not_a_directory(tmp_path):
    path = tmp_path / "file.jar"
    path.write_bytes(b"")
    with pytest.raises(TargetNotADirectoryError, match="is not a directory"):
        get_jar_urls_in_directory(path)


def test_require_file_rejects_directories(tmp_path):
    with pytest.raises(InputNotFoundError):
        require_file(tmp_path)
    with pytest.raises(InputNotFoundError):
        require_directory(tmp_path / "missing")


def test_copy_file_no_overwrite(tmp_path):
    source = tmp_path / "source.bin"
    source.write_bytes(b"payload")
    destination = tmp_path / "copy.bin"

    assert copy_file_no_overwrite(source, destination, buffer_size=2) == destination
    assert destination.read_bytes() == b"payload"

    with pytest.raises(DestinationExistsError):
        copy_file_no_overwrite(source, destination)


def test_copy_missing_source_is_io_error(tmp_path):
    with pytest.raises(ArchiveIOError):
        copy_file_no_overwrite(tmp_path / "missing", tmp_path / "copy")


@pytest.mark.skipif(os.name != "posix", reason="POSIX permission model required")
def test_set_posix_permissions(tmp_path):
    path = tmp_path / "file.txt"
    path.write_text("x")

    set_posix_permissions(path, "rwxr-x---")

    assert stat.S_IMODE(path.stat().st_mode) == 0o750


def test_set_posix_permissions_rejects_bad_grammar(tmp_path):
    path = tmp_path / "file.txt"
    path.write_text("x")
    with pytest.raises(ValueError):
        set_posix_permissions(path, "rwx")


def test_set_posix_permissions_on_missing_file(tmp_path):
    with pytest.raises(ArchiveIOError):
        set_posix_permissions(tmp_path / "missing", "rw-r--r--")
