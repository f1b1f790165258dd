"""Deterministic depth-first discovery of post source files"""

import logging
import stat
from pathlib import Path

from mdfeed.errors import ScanError


logger = logging.getLogger(__name__)


def scan_dir(root: str | Path, extension: str) -> list[str]:
    """Return paths under root ending with extension, depth-first, names sorted per directory.

    Any unreadable directory or entry raises ScanError; nothing is skipped.
    """
    found: list[str] = []

    def _scan(directory: Path) -> None:
        try:
            names = sorted(p.name for p in directory.iterdir())
        except OSError as e:
            raise ScanError(directory, e) from e
        for name in names:
            path = directory / name
            try:
                mode = path.stat().st_mode
            except OSError as e:
                raise ScanError(path, e) from e
            if stat.S_ISREG(mode) and str(path).endswith(extension):
                found.append(str(path))
            elif stat.S_ISDIR(mode):
                _scan(path)

    _scan(Path(root))
    logger.debug("Scanned %s: %d file(s) matching %r", root, len(found), extension)
    return found


def read_source(path: str) -> str:
    """Read one post source as UTF-8."""
    try:
        return Path(path).read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise ScanError(path, e) from e
