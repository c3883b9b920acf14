from __future__ import annotations

import os
from pathlib import Path

from tagrel.core.result import Err, Ok, Result
from tagrel.output.console import ConsoleProtocol
from tagrel.release.errors import AssetDirError, ReleaseError


def collect_assets(
    *,
    root: Path,
    component: str,
    console: ConsoleProtocol,
) -> Result[tuple[Path, ...], ReleaseError]:
    """List the regular files directly inside ``root/component``.

    Anything that is not a regular file (subdirectories, FIFOs, sockets,
    broken symlinks) is skipped with a warning. Returned paths are relative to
    ``root`` (``component/<name>``), in directory enumeration order.
    """
    directory = root / component
    try:
        with os.scandir(directory) as it:
            entries = list(it)
    except OSError as e:
        return Err(AssetDirError(path=Path(component), reason=e.strerror or str(e)))

    files: list[Path] = []
    for entry in entries:
        if entry.is_dir():
            console.warning(f"skipping dir '{entry.name}'")
            continue
        if not entry.is_file():
            console.warning(f"skipping '{entry.name}' (not a regular file)")
            continue
        files.append(Path(component) / entry.name)

    return Ok(tuple(files))
