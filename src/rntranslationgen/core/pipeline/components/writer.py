from __future__ import annotations

"""
Artifact Persistence.

Writes rendered artifacts into the output directory. Every artifact is
already fully rendered in memory when this runs, and each file is swapped
in atomically, so a failure never leaves a truncated artifact behind.
"""

import logging
import os
from typing import List

from rntranslationgen.domain.pipeline_models import Artifact
from rntranslationgen.infra.fs import read_bytes, write_bytes_atomic

logger = logging.getLogger(__name__)


def write_artifacts(
        artifacts: List[Artifact],
        output_dir: str,
        skip_unchanged: bool = True,
) -> List[str]:
    """
    Persist artifacts under `output_dir`.

    With `skip_unchanged`, files whose content is already identical are left
    untouched so their modification time does not change. Runs that format
    afterwards pass False: the file on disk holds formatted text, which never
    equals the raw rendering, so comparing would only cost a read.

    Args:
        artifacts: Rendered artifacts.
        output_dir: Existing destination directory.
        skip_unchanged: Compare with the existing file before writing.

    Returns:
        List[str]: Absolute paths of all artifacts, in input order.

    Raises:
        OSError: If the destination is not writable.
    """
    written: List[str] = []
    for artifact in artifacts:
        path = os.path.join(output_dir, artifact.name)
        data = artifact.encode()
        if skip_unchanged and read_bytes(path) == data:
            logger.debug(f"Unchanged: {path}")
        else:
            write_bytes_atomic(path, data)
            logger.info(f"Wrote {path}")
        written.append(os.path.abspath(path))
    return written
