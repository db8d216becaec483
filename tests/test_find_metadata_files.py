"""Tests for descriptor file discovery."""

import os
from pathlib import Path

import pytest

from property_documenter.errors import DiscoveryError
from property_documenter.find_metadata_files import find_metadata_files


def _descriptor(root: Path, *parents: str) -> Path:
    meta_inf = root.joinpath(*parents, "META-INF")
    meta_inf.mkdir(parents=True, exist_ok=True)
    f = meta_inf / "spring-configuration-metadata.json"
    f.write_text("{}", encoding="utf-8")
    return f


def test_finds_nested_descriptors(tmp_path: Path) -> None:
    """Verify that descriptors are found at any depth below a root."""
    a = _descriptor(tmp_path, "module-a", "target", "classes")
    b = _descriptor(tmp_path, "module-b", "build")
    found = find_metadata_files([tmp_path])
    assert sorted(found) == sorted([a, b])


def test_matches_path_segments_not_characters(tmp_path: Path) -> None:
    """Verify that only a META-INF directory segment qualifies."""
    (tmp_path / "XMETA-INF").mkdir()
    (tmp_path / "XMETA-INF" / "spring-configuration-metadata.json").write_text("{}")
    (tmp_path / "META-INF").mkdir()
    (tmp_path / "META-INF" / "my-spring-configuration-metadata.json").write_text("{}")
    (tmp_path / "spring-configuration-metadata.json").write_text("{}")
    assert find_metadata_files([tmp_path]) == []


def test_no_files_is_not_an_error(tmp_path: Path) -> None:
    """Verify that an empty folder yields an empty list."""
    assert find_metadata_files([tmp_path]) == []


def test_multiple_roots_keep_root_order(tmp_path: Path) -> None:
    """Verify that files from the first root come before the second root's."""
    first = _descriptor(tmp_path / "z-first")
    second = _descriptor(tmp_path / "a-second")
    found = find_metadata_files([tmp_path / "z-first", tmp_path / "a-second"])
    assert found == [first, second]


def test_missing_root_raises(tmp_path: Path) -> None:
    """Verify that a non-existent root is a discovery error naming the path."""
    missing = tmp_path / "nope"
    with pytest.raises(DiscoveryError) as excinfo:
        find_metadata_files([missing])
    assert excinfo.value.resource == str(missing)


def test_root_may_be_the_descriptor_itself(tmp_path: Path) -> None:
    """Verify that a descriptor passed directly as a root is accepted."""
    f = _descriptor(tmp_path)
    assert find_metadata_files([f]) == [f]


def test_custom_descriptor_path(tmp_path: Path) -> None:
    """Verify that the descriptor suffix can be configured."""
    (tmp_path / "META-INF").mkdir()
    f = tmp_path / "META-INF" / "additional-spring-configuration-metadata.json"
    f.write_text("{}")
    found = find_metadata_files(
        [tmp_path], "META-INF/additional-spring-configuration-metadata.json"
    )
    assert found == [f]


def test_unreadable_subfolder_raises(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Verify that a folder the walk cannot list is a discovery error naming it."""
    _descriptor(tmp_path, "ok")
    locked = tmp_path / "locked"
    locked.mkdir()
    real_scandir = os.scandir

    def scandir(path: object = ".") -> object:
        if Path(os.fspath(path)) == locked:
            raise PermissionError(13, "Permission denied", os.fspath(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", scandir)
    with pytest.raises(DiscoveryError) as excinfo:
        find_metadata_files([tmp_path])
    assert excinfo.value.resource == str(locked)
