"""File storage utilities.

Uploaded files are written to a single flat directory under the name the
client sent.  There is no locking: concurrent uploads of the same name race
and the last writer wins.
"""
import logging
import os
import shutil
from typing import BinaryIO, Dict, List, Tuple

from .errors import BadRequest, InternalError

logger = logging.getLogger("filedrop.storage")

CHUNK_SIZE = 1024 * 1024


def ensure_storage_dir(storage_dir: str) -> None:
    """Ensure that the storage directory exists."""
    os.makedirs(storage_dir, exist_ok=True)


def resolve_filename(filename: str) -> str:
    """Reduce a client-supplied filename to its last path component."""
    if not filename:
        raise BadRequest("http: no such file")
    name = os.path.basename(filename.rstrip("/"))
    if name in ("", ".", "..") or "\x00" in name:
        raise BadRequest(f"invalid filename: {filename!r}")
    return name


def save_stream(storage_dir: str, filename: str, stream: BinaryIO) -> Tuple[str, int]:
    """Create (or truncate) ``storage_dir/filename`` and copy ``stream`` into it.

    Returns the destination path and the number of bytes written.  A failed
    copy can leave a partial file behind.
    """
    dest = os.path.join(storage_dir, filename)
    try:
        stream.seek(0)
        with open(dest, "wb") as out_f:
            shutil.copyfileobj(stream, out_f, CHUNK_SIZE)
            written = out_f.tell()
    except (OSError, ValueError) as e:
        logger.exception("Failed to write uploaded file to %s", dest)
        raise InternalError(str(e)) from e
    return dest, written


def list_files(storage_dir: str) -> List[str]:
    """Names of every entry in the storage directory, sorted."""
    try:
        entries = os.listdir(storage_dir)
    except OSError as e:
        logger.exception("Failed to read storage directory %s", storage_dir)
        raise InternalError(str(e)) from e
    # names that are not valid UTF-8 are listed with \xNN escapes
    return sorted(os.fsencode(n).decode("utf-8", "backslashreplace") for n in entries)


def check_storage(storage_dir: str) -> Dict[str, bool]:
    exists = os.path.isdir(storage_dir)
    return {
        "exists": exists,
        "writable": exists and os.access(storage_dir, os.W_OK | os.X_OK),
    }
