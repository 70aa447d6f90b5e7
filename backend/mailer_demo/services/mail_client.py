"""
Builds the process-wide GmailMailer from environment configuration.

The service account can be given inline (GMAIL_MAILER_SERVICE_ACCOUNT, a JSON
object) or as a file path (GMAIL_MAILER_SERVICE_ACCOUNT_PATH). The inline form
wins when both are set.
"""

import json
import logging
from pathlib import Path
from typing import Optional

import httpx
from pydantic import BaseModel, ConfigDict

from mailer_demo import config
from mailer_demo.services.gmail_mailer import GmailMailer

logger = logging.getLogger(__name__)


class EmailClientResult(BaseModel):
    """Result of initialize_email_client; gmail_client is None on failure."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    status: bool
    gmail_client: Optional[GmailMailer] = None
    message: str


def _parse_service_account(raw: str, source: str) -> dict:
    try:
        account = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError(f"{source} is not valid JSON: {exc}")
    if not isinstance(account, dict):
        raise ValueError(f"{source} must contain a JSON object")
    return account


def load_service_account(
    inline_json: Optional[str],
    path: Optional[str],
) -> dict:
    """
    Resolve the service account credentials.

    Raises:
        ValueError: neither source is configured, or the JSON is malformed
        FileNotFoundError: the configured path does not exist
    """
    if inline_json:
        return _parse_service_account(inline_json, "GMAIL_MAILER_SERVICE_ACCOUNT")

    if path:
        absolute_path = Path(path).expanduser().resolve()
        if not absolute_path.exists():
            raise FileNotFoundError(f"[Email Client] - File not found at {absolute_path}")
        return _parse_service_account(
            absolute_path.read_text(encoding="utf-8"), str(absolute_path)
        )

    raise ValueError(
        "[Email Client] - Both GMAIL_MAILER_SERVICE_ACCOUNT and "
        "GMAIL_MAILER_SERVICE_ACCOUNT_PATH environment variables are not defined."
    )


async def initialize_email_client(
    http_client: Optional[httpx.AsyncClient] = None,
) -> EmailClientResult:
    """
    Create and authorize a GmailMailer from the environment.

    Never raises: every failure is folded into a result with status False so
    the server can still start and serve the front-end.
    """
    gmail_mailer = GmailMailer(http_client=http_client)

    try:
        gmail_sender_email = config.GMAIL_MAILER_SENDER_EMAIL
        if not gmail_sender_email:
            raise ValueError(
                "[Email Client] - GMAIL_MAILER_SENDER_EMAIL environment variable is not defined."
            )

        gmail_service_account = load_service_account(
            config.GMAIL_MAILER_SERVICE_ACCOUNT,
            config.GMAIL_MAILER_SERVICE_ACCOUNT_PATH,
        )

        init_result = await gmail_mailer.initialize_client(
            gmail_service_account=gmail_service_account,
            gmail_sender_email=gmail_sender_email,
        )
        if not init_result.status:
            raise RuntimeError(f"Failed to initialize: {init_result.message}")

    except (ValueError, TypeError, OSError, RuntimeError) as exc:
        await gmail_mailer.aclose()
        return EmailClientResult(
            status=False,
            gmail_client=None,
            message=f"[Mailer Initialization] - Failed: {exc}",
        )

    return EmailClientResult(
        status=True,
        gmail_client=gmail_mailer,
        message="[Mailer Initialization] - Success",
    )
