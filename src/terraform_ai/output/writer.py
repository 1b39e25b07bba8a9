"""Persist validated artifacts to disk."""

import logging
import os
from pathlib import Path
import stat
import tempfile

log = logging.getLogger(__name__)


def write_artifact(text: str, destination: str | Path) -> Path:
    """Write ``text`` as UTF-8 to ``destination`` and return its resolved path.

    The content goes to a temporary file in the destination directory first
    and is moved into place with ``os.replace``, so a failed write never
    leaves a truncated artifact behind. The result keeps the mode of the file
    it replaces, or gets the umask default when the file is new.
    ``OSError`` propagates unchanged.
    """
    target = Path(destination)

    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
            fh.write(text)
        # mkstemp creates the file as 0o600
        os.chmod(tmp_name, _file_mode(target))
        os.replace(tmp_name, target)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise

    resolved = target.resolve()
    log.debug("Wrote %d characters to %s", len(text), resolved)
    return resolved


def _file_mode(target: Path) -> int:
    try:
        return stat.S_IMODE(target.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask
