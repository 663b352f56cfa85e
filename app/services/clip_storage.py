"""On-disk storage for uploaded clips."""
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import BinaryIO, Optional

logger = logging.getLogger(__name__)

CLIPS_SUBDIR = "clips"
CHUNK_SIZE = 1024 * 1024
DEFAULT_MIME_TYPE = "video/mp4"

MIME_TYPES = {
    ".mp4": "video/mp4",
    ".avi": "video/x-msvideo",
    ".webm": "video/webm",
}


class UploadTooLargeError(Exception):
    """Raised when an upload grows past the configured cap while being written."""


def clips_dir(upload_dir: str) -> Path:
    return Path(upload_dir) / CLIPS_SUBDIR


def ensure_clips_dir(upload_dir: str) -> Path:
    """Create the clip directory (and parents) if missing."""
    path = clips_dir(upload_dir)
    path.mkdir(parents=True, exist_ok=True)
    return path


def build_clip_filename(booking_hour_id: int, original_filename: Optional[str], now: Optional[datetime] = None) -> str:
    """
    Build the stored filename for a clip.

    Format: clip_<booking_hour_id>_<YYYYMMDD_HHMMSS><ext>, where ext is the
    extension of the uploaded filename (with its dot, possibly empty).

    Args:
        booking_hour_id: Owning booking hour
        original_filename: Filename declared by the client
        now: Timestamp to embed, defaults to the current local time

    Returns:
        Generated filename
    """
    now = now or datetime.now()
    ext = os.path.splitext(original_filename or "")[1]
    return f"clip_{booking_hour_id}_{now.strftime('%Y%m%d_%H%M%S')}{ext}"


def detect_mime_type(content_type: Optional[str], filename: Optional[str]) -> str:
    """Use the declared content type, else guess from the extension."""
    if content_type:
        return content_type
    ext = os.path.splitext(filename or "")[1].lower()
    return MIME_TYPES.get(ext, DEFAULT_MIME_TYPE)


def save_stream(source: BinaryIO, destination: Path, max_bytes: Optional[int] = None) -> int:
    """
    Copy a file-like object to disk in chunks.

    Args:
        source: Readable binary stream
        destination: Target path, truncated if it exists
        max_bytes: Abort once more than this many bytes were written

    Returns:
        Number of bytes written

    Raises:
        UploadTooLargeError: If max_bytes was exceeded; the partial file is removed
        OSError: On filesystem failure
    """
    written = 0
    with destination.open("wb") as out:
        while True:
            chunk = source.read(CHUNK_SIZE)
            if not chunk:
                break
            written += len(chunk)
            if max_bytes is not None and written > max_bytes:
                break
            out.write(chunk)

    if max_bytes is not None and written > max_bytes:
        destination.unlink(missing_ok=True)
        raise UploadTooLargeError(f"Upload exceeds {max_bytes} bytes")

    logger.debug(f"Wrote {written} bytes to {destination}")
    return written
