"""
Snapshot Persistence

Writes JSON snapshots so a reader of the target path sees either the
previous complete file or the new complete file, never a partial one:
the new content goes to a temporary file in the same directory, is
fsynced, and is then renamed over the target with os.replace.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from ..common.errors import PersistenceFailed

logger = logging.getLogger(__name__)


def serialize_snapshot(value: Any) -> str:
    """
    Stable, reviewable text form: 2-space indent, key order preserved.

    NaN and Infinity raise ValueError; they have no JSON encoding.
    """
    return json.dumps(value, indent=2, ensure_ascii=False, allow_nan=False)


def apply_default_mode(path: str | Path) -> None:
    """Give a temporary file the mode a plain open() would have (0o666 minus umask)."""
    umask = os.umask(0)
    os.umask(umask)
    os.chmod(path, 0o666 & ~umask)


def write_snapshot(value: Any, path: str | Path) -> Path:
    """
    Atomically replace the snapshot at path with value.

    Args:
        value: JSON-compatible value (dict for settings, list for catalog)
        path: Target snapshot file; parent directories are created

    Returns:
        The target path

    Raises:
        PersistenceFailed: If serialization or any filesystem step fails.
            The previous file content is unchanged in that case.
    """
    target = Path(path)

    try:
        text = serialize_snapshot(value)
    except (TypeError, ValueError) as e:
        raise PersistenceFailed(f"Cannot serialize snapshot for {target}: {e}") from e

    tmp_name = None
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=target.parent,
            prefix=f".{target.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(text)
            tmp.flush()
            os.fsync(tmp.fileno())
        apply_default_mode(tmp_name)
        os.replace(tmp_name, target)
        tmp_name = None
    except OSError as e:
        raise PersistenceFailed(f"Cannot write snapshot {target}: {e}") from e
    finally:
        if tmp_name is not None:
            try:
                os.unlink(tmp_name)
            except OSError:
                logger.debug("Temporary file already gone: %s", tmp_name)

    logger.debug("Wrote snapshot %s (%d bytes)", target, len(text))
    return target


def read_snapshot(path: str | Path) -> Any:
    """
    Load a snapshot file.

    Raises:
        FileNotFoundError: If the snapshot does not exist
        json.JSONDecodeError: If the content is not valid JSON
    """
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)
