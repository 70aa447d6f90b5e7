"""
Attachment helpers for the demo emails.
Turns sample files and generated text into base64 attachments and maintains
the server history CSV that the status email ships with.
"""

import base64
import logging
from pathlib import Path

from mailer_demo.models.email import Attachment

logger = logging.getLogger(__name__)

SERVER_HISTORY_HEADER = "Date,Event,Status\n"

_HISTORY_EVENTS = {
    "start": "Server Start",
    "shutdown": "Server Shutdown",
}


def file_attachment(path: Path, filename: str, mime_type: str) -> Attachment:
    """
    Read a file from disk and wrap it as a base64 attachment.

    Raises:
        OSError: if the file cannot be read; the caller's request fails.
    """
    data = Path(path).read_bytes()
    return Attachment(
        filename=filename,
        mime_type=mime_type,
        content=base64.b64encode(data).decode("ascii"),
    )


def text_attachment(text: str, filename: str, mime_type: str = "text/plain") -> Attachment:
    """Wrap generated text content (UTF-8) as a base64 attachment."""
    return Attachment(
        filename=filename,
        mime_type=mime_type,
        content=base64.b64encode(text.encode("utf-8")).decode("ascii"),
    )


def append_server_history(path: Path, status: str, timestamp: str) -> None:
    """
    Append one lifecycle event to the server history CSV.

    Creates the file with its header row when it does not exist yet. Write
    failures are logged and ignored; the status email still goes out with
    whatever history is on disk.
    """
    event = _HISTORY_EVENTS.get(status, status)
    path = Path(path)
    try:
        if not path.exists():
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(SERVER_HISTORY_HEADER, encoding="utf-8")
        with path.open("a", encoding="utf-8") as fh:
            fh.write(f"{timestamp},{event},Successful\n")
    except OSError as exc:
        logger.error(f"Failed to write to server history file {path}: {exc}")
