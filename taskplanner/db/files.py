"""Whole-file reads and atomic writes for the file-backed stores."""
import os
import tempfile
from pathlib import Path

from taskplanner.core.errors import StorageError


def read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise StorageError(f"Could not decode {path.name}: {e}") from e
    except OSError as e:
        raise StorageError(f"Could not read {path.name}: {e}") from e


def write_text_atomic(path: Path, text: str) -> None:
    """Write ``text`` to ``path`` so readers see either the old or new file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    replaced = False
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        os.replace(tmp_name, path)
        replaced = True
    except (OSError, UnicodeError) as e:
        raise StorageError(f"Could not write {path.name}: {e}") from e
    finally:
        if not replaced:
            try:
                os.unlink(tmp_name)
            except FileNotFoundError:
                pass


def rename_file(source: Path, target: Path) -> None:
    try:
        os.rename(source, target)
    except OSError as e:
        raise StorageError(f"Could not rename {source.name} to {target.name}: {e}") from e


def remove_file(path: Path) -> None:
    try:
        path.unlink()
    except OSError as e:
        raise StorageError(f"Could not remove {path.name}: {e}") from e
