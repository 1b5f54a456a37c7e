from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path normalization, input document discovery and all-or-nothing
artifact writes. Acts as an abstraction over the 'os' module so the core
never touches the filesystem directly.
"""

import os
import shutil
import tempfile
from typing import List, Optional

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], base_dir: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Relative paths are anchored at `base_dir` rather than
    the process working directory.

    Args:
        path: Raw input path string.
        base_dir: Directory that relative paths are resolved against.

    Returns:
        str: Normalized absolute path, or an empty string for empty input.
    """
    p = (path or "").strip()
    if not p:
        return ""
    p = os.path.expandvars(os.path.expanduser(p))
    if not os.path.isabs(p):
        p = os.path.join(base_dir, p)
    return os.path.abspath(p)


# -----------------------------------------------------------------------------
# DISCOVERY API
# -----------------------------------------------------------------------------

def list_files_with_suffix(directory: str, suffix: str) -> List[str]:
    """
    List regular files directly inside `directory` whose name ends with `suffix`.

    Subdirectories are not descended into. Names are sorted so that the
    enumeration order is identical across platforms and runs.

    Args:
        directory: Directory to scan.
        suffix: Required file name ending (e.g. '.json').

    Returns:
        List[str]: Absolute file paths in stable order.
    """
    names = sorted(os.listdir(directory))
    out: List[str] = []
    for name in names:
        full = os.path.join(directory, name)
        if name.endswith(suffix) and os.path.isfile(full):
            out.append(os.path.abspath(full))
    return out


def check_existing_output_files(output_dir: str, names: List[str]) -> List[str]:
    """
    Identify which of the expected artifacts already exist in a directory.

    Args:
        output_dir: Directory to inspect.
        names: List of filenames to check for existence.

    Returns:
        List[str]: Absolute paths of files that already exist.
    """
    existing: List[str] = []
    for n in names:
        full = os.path.join(output_dir, n)
        if os.path.exists(full):
            existing.append(full)
    return existing


# -----------------------------------------------------------------------------
# WRITE API
# -----------------------------------------------------------------------------

def write_bytes_atomic(path: str, data: bytes) -> None:
    """
    Replace `path` with `data` without ever exposing a half-written file.

    The content goes to a temporary sibling first and is moved into place
    with `os.replace`, which is atomic on the same filesystem. The result
    keeps the mode of the file it replaces; new files get the mode a plain
    `open(path, "w")` would give them.

    Args:
        path: Final destination.
        data: Full file content.

    Raises:
        OSError: If the directory is not writable.
    """
    directory = os.path.dirname(os.path.abspath(path))
    fd, tmp_path = tempfile.mkstemp(
        prefix=f".{os.path.basename(path)}.", suffix=".tmp", dir=directory
    )
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        if os.path.exists(path):
            shutil.copymode(path, tmp_path)
        else:
            os.chmod(tmp_path, 0o666 & ~_current_umask())
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise


def read_bytes(path: str) -> Optional[bytes]:
    """Return the content of `path`, or None if it does not exist."""
    if not os.path.isfile(path):
        return None
    with open(path, "rb") as f:
        return f.read()


def _current_umask() -> int:
    # The umask can only be read by setting it
    mask = os.umask(0)
    os.umask(mask)
    return mask
