"""Shared fixtures building sample tarballs at test time."""

from __future__ import annotations

import gzip
import io
import os
import sys
import tarfile
from pathlib import Path

import pytest

# Ensure project root is on sys.path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

# (relative path, contents, mode); None contents marks a directory entry.
SAMPLE_ENTRIES = [
    ("file1.txt", "file1\n", 0o644),
    ("dir1", None, 0o755),
    ("dir1/subdir1", None, 0o755),
    ("dir1/subdir1/file2.txt", "file2\n", 0o644),
    ("dir1/subdir1/file3.txt", "file3\n", 0o644),
    ("dir1/subdir2", None, 0o755),
    ("dir1/subdir2/file4.txt", "file4\n", 0o644),
    ("dir1/file5_400.txt", "file5\n", 0o400),
    ("dir2", None, 0o755),
    ("dir2/file6.txt", "file6\n", 0o644),
    ("file7.txt", "file7\n", 0o644),
]

EXPECTED_FILES = [
    ("file1.txt", "file1\n", "rw-r--r--"),
    ("dir1/subdir1/file2.txt", "file2\n", "rw-r--r--"),
    ("dir1/subdir1/file3.txt", "file3\n", "rw-r--r--"),
    ("dir1/subdir2/file4.txt", "file4\n", "rw-r--r--"),
    ("dir1/file5_400.txt", "file5\n", "r--------"),
    ("dir2/file6.txt", "file6\n", "rw-r--r--"),
    ("file7.txt", "file7\n", "rw-r--r--"),
]


def add_entry(tar: tarfile.TarFile, name: str, contents, mode: int) -> None:
    info = tarfile.TarInfo(name)
    info.mode = mode
    if contents is None:
        info.type = tarfile.DIRTYPE
        tar.addfile(info)
        return
    data = contents.encode("utf-8") if isinstance(contents, str) else contents
    info.size = len(data)
    tar.addfile(info, io.BytesIO(data))


def build_tar(path: Path, entries) -> Path:
    with tarfile.open(path, "w") as tar:
        for name, contents, mode in entries:
            add_entry(tar, name, contents, mode)
    return path


def gzip_file(source: Path, destination: Path) -> Path:
    destination.write_bytes(gzip.compress(source.read_bytes()))
    return destination


@pytest.fixture
def archives_dir(tmp_path):
    path = tmp_path / "archives"
    path.mkdir()
    return path


@pytest.fixture
def sample_tar(archives_dir):
    return build_tar(archives_dir / "archive.tar", SAMPLE_ENTRIES)


@pytest.fixture
def sample_tar_gz(archives_dir, tmp_path):
    plain = build_tar(tmp_path / "plain.tar", SAMPLE_ENTRIES)
    return gzip_file(plain, archives_dir / "archive.tar.gz")


@pytest.fixture
def target_dir(tmp_path):
    path = tmp_path / "target"
    path.mkdir()
    return path
