"""JSON document helpers for tool configs owned by other programs."""

from __future__ import annotations

import json
import os
import stat
import tempfile
from contextlib import suppress
from pathlib import Path


def load_json_file(path: Path) -> object:
    """Load and parse a UTF-8 JSON document."""
    return json.loads(path.read_text(encoding="utf-8"))


def write_json_atomic(
    *,
    path: Path,
    payload: object,
    temp_prefix: str,
    temp_suffix: str,
    sort_keys: bool = True,
) -> None:
    """Replace ``path`` with ``payload`` via a sibling temp file and rename.

    Readers see either the old document or the new one. When ``path``
    already exists its permission bits carry over to the new file. Pass
    ``sort_keys=False`` for documents owned by another tool so their key
    order survives the rewrite.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    previous_mode = _existing_mode(path)

    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=path.parent,
            prefix=temp_prefix,
            suffix=temp_suffix,
            delete=False,
        ) as handle:
            temp_path = Path(handle.name)
            json.dump(payload, handle, indent=2, sort_keys=sort_keys)
            handle.write("\n")
            handle.flush()
            os.fsync(handle.fileno())
        if previous_mode is not None:
            temp_path.chmod(previous_mode)
        os.replace(temp_path, path)
    except BaseException:
        if temp_path is not None:
            with suppress(FileNotFoundError):
                temp_path.unlink()
        raise


def _existing_mode(path: Path) -> int | None:
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        return None
