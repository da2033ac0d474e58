"""Load key scripts from text files and archives."""
from pathlib import Path
import tarfile
import tempfile
from typing import Callable, Dict, List, Tuple, Type
import zipfile

import py7zr
from pydantic import BaseModel, ConfigDict, FilePath

from keypad_calculator.common.logger import logger


# Raised by the archive libraries on truncated or corrupt input
ARCHIVE_ERRORS: Tuple[Type[Exception], ...] = (
    zipfile.BadZipFile,
    tarfile.TarError,
    py7zr.Bad7zFile,
)


def _first_txt(names: List[str], kind: str) -> str:
    """Name of the first .txt member, in archive order."""
    for name in names:
        if name.endswith(".txt"):
            return name
    raise ValueError(f"📄❌ No .txt file found in {kind} archive")


class KeyScriptLoader(BaseModel):
    """
    Reads key scripts, one per line, from a plain text file or an archive.

    Supported inputs:
    - .txt
    - .zip, .tar.xz and .7z archives holding at least one .txt file (the first one is used)
    """

    model_config = ConfigDict(frozen=True)

    def load(self, input_file: FilePath) -> List[str]:
        """
        Return the non-empty, stripped lines of the input.

        :param FilePath input_file: Path to the text file or archive

        :return: Key scripts in file order
        :rtype: List[str]
        :raises ValueError: If the format is unsupported or an archive contains no .txt file
        :raises zipfile.BadZipFile, tarfile.TarError, py7zr.Bad7zFile: If an archive is corrupt
        """
        input_file = Path(input_file)
        content: str = self._reader_for(input_file)(input_file)

        scripts = [line.strip() for line in content.splitlines() if line.strip()]
        logger.info(f"📄 Loaded {len(scripts)} key scripts from {input_file}")
        return scripts

    def _reader_for(self, path: Path) -> Callable[[Path], str]:
        readers: Dict[str, Callable[[Path], str]] = {
            ".txt": self._read_text,
            ".zip": self._read_zip,
            ".tar.xz": self._read_tar_xz,
            ".7z": self._read_7z,
        }
        suffix = "".join(path.suffixes[-2:]) if path.suffixes[-2:] == [".tar", ".xz"] else path.suffix
        reader = readers.get(suffix)
        if reader is None:
            raise ValueError(f"📄❌ Unsupported key script format: {suffix or path.name}")
        return reader

    @staticmethod
    def _read_text(path: Path) -> str:
        return path.read_text(encoding="utf-8")

    @staticmethod
    def _read_zip(path: Path) -> str:
        with zipfile.ZipFile(path, "r") as zf:
            member = _first_txt(zf.namelist(), "zip")
            return zf.read(member).decode("utf-8")

    @staticmethod
    def _read_tar_xz(path: Path) -> str:
        with tarfile.open(path, "r:xz") as tf:
            files = {m.name: m for m in tf.getmembers() if m.isfile()}
            member = _first_txt(list(files), "tar.xz")
            stream = tf.extractfile(files[member])
            return stream.read().decode("utf-8")

    @staticmethod
    def _read_7z(path: Path) -> str:
        # py7zr only extracts to disk
        with py7zr.SevenZipFile(path, mode="r") as archive:
            member = _first_txt(archive.getnames(), "7z")
            with tempfile.TemporaryDirectory() as tmpdir:
                archive.extract(path=tmpdir, targets=[member])
                return (Path(tmpdir) / member).read_text(encoding="utf-8")
