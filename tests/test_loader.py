"""Test class KeyScriptLoader."""
import tarfile
import zipfile

import py7zr
import pytest

from keypad_calculator.common.loader import ARCHIVE_ERRORS, KeyScriptLoader


def test_load_txt(tmp_path) -> None:
    """Plain text files yield their non-empty stripped lines."""
    input_file = tmp_path / "keys.txt"
    input_file.write_text("1 + 1 =\n\n  2 × 2 =  \n", encoding="utf-8")

    assert KeyScriptLoader().load(input_file) == ["1 + 1 =", "2 × 2 ="]


def test_load_zip(tmp_path) -> None:
    """Check that a .zip archive can be extracted and read correctly."""
    txt = tmp_path / "keys.txt"
    txt.write_text("3 + 3 =\n", encoding="utf-8")

    zip_path = tmp_path / "keys.zip"
    with zipfile.ZipFile(zip_path, "w") as zf:
        zf.write(txt, arcname="keys.txt")

    assert KeyScriptLoader().load(zip_path) == ["3 + 3 ="]


def test_load_tar_xz(tmp_path) -> None:
    """Check that a .tar.xz archive can be extracted and read correctly."""
    txt = tmp_path / "keys.txt"
    txt.write_text("4 * 4 =\n", encoding="utf-8")

    tar_path = tmp_path / "keys.tar.xz"
    with tarfile.open(tar_path, "w:xz") as tf:
        tf.add(txt, arcname="keys.txt")

    assert KeyScriptLoader().load(tar_path) == ["4 * 4 ="]


def test_load_7z(tmp_path) -> None:
    """Check that a .7z archive can be extracted and read correctly."""
    txt = tmp_path / "keys.txt"
    txt.write_text("5 - 2 =\n", encoding="utf-8")

    archive_path = tmp_path / "keys.7z"
    with py7zr.SevenZipFile(archive_path, "w") as archive:
        archive.write(txt, arcname="keys.txt")

    assert KeyScriptLoader().load(archive_path) == ["5 - 2 ="]


def test_load_archive_without_txt(tmp_path) -> None:
    """Verify that loading fails if no .txt file exists in the archive."""
    zip_path = tmp_path / "empty.zip"
    with zipfile.ZipFile(zip_path, "w") as zf:
        zf.writestr("data.bin", b"\x00\x01")

    with pytest.raises(ValueError):
        KeyScriptLoader().load(zip_path)


def test_load_unsupported_format(tmp_path) -> None:
    """Ensure unsupported archive formats raise a ValueError."""
    file_path = tmp_path / "keys.rar"
    file_path.write_text("1 + 1 =")

    with pytest.raises(ValueError):
        KeyScriptLoader().load(file_path)


def test_load_txt_inside_zip_subfolder(tmp_path) -> None:
    """The first .txt member is used, whatever its folder."""
    zip_path = tmp_path / "keys.zip"
    with zipfile.ZipFile(zip_path, "w") as zf:
        zf.writestr("readme.md", "ignored")
        zf.writestr("scripts/keys.txt", "6 × 7 =\n")

    assert KeyScriptLoader().load(zip_path) == ["6 × 7 ="]


@pytest.mark.parametrize("name", ["keys.zip", "keys.tar.xz", "keys.7z"])
def test_load_corrupt_archive(tmp_path, name) -> None:
    """Corrupt archives raise one of the archive library errors."""
    archive_path = tmp_path / name
    archive_path.write_bytes(b"not an archive at all")

    with pytest.raises(ARCHIVE_ERRORS):
        KeyScriptLoader().load(archive_path)
