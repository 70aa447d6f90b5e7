"""
Demo server configuration.
Reads .env / .env.local and exposes the settings as module-level constants.
"""

import os
from pathlib import Path
from urllib.parse import urlparse

from dotenv import find_dotenv, load_dotenv

# Both files are looked up from the working directory; .env.local wins over .env
load_dotenv(find_dotenv(usecwd=True))
load_dotenv(find_dotenv(".env.local", usecwd=True), override=True)

PACKAGE_DIR = Path(__file__).resolve().parent
PUBLIC_DIR = PACKAGE_DIR / "public"
FILES_DIR = Path(os.getenv("DEMO_FILES_DIR") or PACKAGE_DIR / "files")
# Written at runtime, so it lives under the working directory, not the package
DATA_DIR = Path(os.getenv("DEMO_DATA_DIR") or "data").resolve()
SERVER_HISTORY_PATH = DATA_DIR / "ServerHistory.csv"

DEFAULT_PORT = 6338


def _port_from_url(url: str) -> int:
    """
    Return the port of DEFAULT_URL, falling back to 6338.

    ``http://localhost:7000`` -> 7000, ``localhost:7000`` -> 7000,
    ``http://localhost`` -> 6338.
    """
    try:
        port = urlparse(url).port
    except ValueError:
        port = None
    if port is None:
        # No scheme: urlparse reads "localhost" as the scheme
        tail = url.rstrip("/").rsplit(":", 1)[-1]
        port = int(tail) if tail.isdigit() else None
    return port or DEFAULT_PORT


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# === Server URL/PORT ===
DEFAULT_URL = os.getenv("DEFAULT_URL", f"http://localhost:{DEFAULT_PORT}").rstrip("/")
PORT = _port_from_url(DEFAULT_URL)
HOST = os.getenv("HOST", "127.0.0.1")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# GmailMailer config
GMAIL_MAILER_SENDER_EMAIL = os.getenv("GMAIL_MAILER_SENDER_EMAIL")
# Either an inline JSON object or a path to the service account file
GMAIL_MAILER_SERVICE_ACCOUNT = os.getenv("GMAIL_MAILER_SERVICE_ACCOUNT")
GMAIL_MAILER_SERVICE_ACCOUNT_PATH = os.getenv("GMAIL_MAILER_SERVICE_ACCOUNT_PATH")

# Demo behaviour
DEMO_RECIPIENT_EMAIL = os.getenv("DEMO_RECIPIENT_EMAIL", "recipient@example.com")
# The purchase demo passes an explicit sender instead of relying on the default
PURCHASE_SENDER_EMAIL = os.getenv(
    "PURCHASE_SENDER_EMAIL", GMAIL_MAILER_SENDER_EMAIL or "no-reply@somnuslabs.com"
)
PACKAGE_NAME = os.getenv("PACKAGE_NAME", "gmail-node-mailer")
DIST_NAME = "gmail-mailer-demo"
OPEN_BROWSER = _env_flag("OPEN_BROWSER", True)
SEND_LIFECYCLE_EMAILS = _env_flag("SEND_LIFECYCLE_EMAILS", False)
SIMULATE_STATUS_DELAY_SECONDS = float(os.getenv("SIMULATE_STATUS_DELAY_SECONDS", "0.5"))
