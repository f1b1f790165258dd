"""All-or-nothing publishing of generated files"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from mdfeed.errors import WriteError


logger = logging.getLogger(__name__)


def _discard(staged: list[tuple[Path, Path]]) -> None:
    for _, tmp in staged:
        tmp.unlink(missing_ok=True)


def _rollback(replaced: list[tuple[Path, Optional[bytes]]]) -> None:
    """Restore replaced targets to their previous content, newest first."""
    for target, previous in reversed(replaced):
        try:
            if previous is None:
                target.unlink(missing_ok=True)
            else:
                target.write_bytes(previous)
        except OSError:
            logger.exception("Rollback failed for %s", target)


def commit_files(files: dict[Path, str]) -> None:
    """Write every file or none of them.

    Contents are staged to temp files beside each target, then moved into
    place with os.replace. A failed move restores the targets already moved.
    """
    staged: list[tuple[Path, Path]] = []
    for target, content in files.items():
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            fd, name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
            staged.append((target, Path(name)))
            with os.fdopen(fd, 'w', encoding='utf-8', newline='') as fh:
                fh.write(content)
            os.chmod(name, 0o644)
        except OSError as e:
            _discard(staged)
            raise WriteError(target, e) from e

    replaced: list[tuple[Path, Optional[bytes]]] = []
    for i, (target, tmp) in enumerate(staged):
        try:
            previous = target.read_bytes() if target.exists() else None
            os.replace(tmp, target)
        except OSError as e:
            _rollback(replaced)
            _discard(staged[i:])
            raise WriteError(target, e) from e
        replaced.append((target, previous))
        logger.debug("Wrote %s", target)
