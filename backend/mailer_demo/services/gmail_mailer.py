"""
Gmail API mail client.

Sends email as a Google Workspace user through a service account with
domain-wide delegation:

  1. sign an RS256 JWT assertion for the sender (PyJWT),
  2. exchange it for an access token at the service account's token_uri,
  3. POST the RFC 822 message, base64url-encoded, to users.messages.send.

MIME assembly is left to the standard library ``email`` package. Send
failures reported by Google (or transport failures) come back as a
``SendEmailResponse`` with ``sent=False`` rather than an exception, so callers
can surface them to the user unchanged.
"""

import base64
import logging
import re
import time
from email.message import EmailMessage
from email.utils import formataddr
from typing import Any, Optional

import httpx
import jwt

from mailer_demo.models.email import (
    InitializeClientResponse,
    SendEmailParams,
    SendEmailResponse,
)

__version__ = "1.0.0"

logger = logging.getLogger(__name__)

GMAIL_SEND_SCOPE = "https://www.googleapis.com/auth/gmail.send"
GMAIL_SEND_URL = "https://gmail.googleapis.com/gmail/v1/users/me/messages/send"
DEFAULT_TOKEN_URI = "https://oauth2.googleapis.com/token"
JWT_BEARER_GRANT = "urn:ietf:params:oauth:grant-type:jwt-bearer"

DEFAULT_SUBJECT = "No Subject"

# Assertion lifetime allowed by Google is at most one hour
_ASSERTION_LIFETIME_SECONDS = 3600
# Refresh the cached token this many seconds before it expires
_TOKEN_EXPIRY_MARGIN_SECONDS = 60

_HTML_PATTERN = re.compile(
    r"<\s*(!doctype\s+html|html|head|body|div|p|br|table|span|h[1-6])\b",
    re.IGNORECASE,
)


class MailerNotInitializedError(RuntimeError):
    """Raised when send_email is called before initialize_client succeeded."""


class MailerAuthError(Exception):
    """Raised when Google refuses to issue an access token."""


def looks_like_html(message: str) -> bool:
    """Return True if the message body contains HTML markup."""
    return bool(_HTML_PATTERN.search(message))


def _json_or_none(response: httpx.Response) -> Optional[Any]:
    try:
        return response.json()
    except ValueError:
        return None


def _google_error_message(body: Optional[Any], fallback: str) -> str:
    """
    Pull the human-readable message out of a Google API error body.

    Token endpoint errors look like ``{"error": "invalid_grant",
    "error_description": "..."}``; Gmail API errors look like
    ``{"error": {"code": 403, "message": "..."}}``.
    """
    if not isinstance(body, dict):
        return fallback
    error = body.get("error")
    if isinstance(error, dict):
        return error.get("message") or fallback
    if isinstance(error, str):
        description = body.get("error_description")
        return f"{error}: {description}" if description else error
    return fallback


class GmailMailer:
    """
    Gmail API client bound to one sender address.

    Create it once, call ``initialize_client`` with the service account and
    the sender, then call ``send_email`` as often as needed. An
    ``httpx.AsyncClient`` can be injected (tests pass one built on
    ``httpx.MockTransport``); otherwise the mailer owns its own client and
    closes it in ``aclose``.
    """

    def __init__(self, http_client: Optional[httpx.AsyncClient] = None):
        self._client = http_client or httpx.AsyncClient(timeout=30.0)
        self._owns_client = http_client is None
        self._service_account: Optional[dict] = None
        self.sender_email: Optional[str] = None
        self._access_token: Optional[str] = None
        self._token_expires_at = 0.0

    @property
    def is_initialized(self) -> bool:
        return self._service_account is not None and self.sender_email is not None

    async def initialize_client(
        self,
        gmail_service_account: dict,
        gmail_sender_email: str,
    ) -> InitializeClientResponse:
        """
        Bind the mailer to a service account and sender, and authorize once.

        Authorizing up front means a bad key or a missing domain-wide
        delegation grant is reported at startup instead of on the first send.

        Returns:
            InitializeClientResponse with status False and the reason on any
            validation or authorization failure.
        """
        missing = [
            key for key in ("client_email", "private_key")
            if not gmail_service_account.get(key)
        ]
        if missing:
            return InitializeClientResponse(
                status=False,
                message=f"Service account is missing required fields: {', '.join(missing)}",
            )

        if not gmail_sender_email or "@" not in gmail_sender_email:
            return InitializeClientResponse(
                status=False,
                message=f"Invalid sender email: {gmail_sender_email!r}",
            )

        self._service_account = dict(gmail_service_account)
        self.sender_email = gmail_sender_email
        self._access_token = None
        self._token_expires_at = 0.0

        try:
            await self._get_access_token()
        except (MailerAuthError, httpx.HTTPError, jwt.PyJWTError, ValueError, TypeError) as exc:
            self._service_account = None
            self.sender_email = None
            logger.error(f"Gmail authorization failed: {exc}")
            return InitializeClientResponse(
                status=False,
                message=f"Gmail authorization failed: {exc}",
            )

        logger.info(
            "Gmail client initialized for %s (service account %s)",
            gmail_sender_email,
            gmail_service_account["client_email"],
        )
        return InitializeClientResponse(status=True, message="Gmail client initialized")

    async def send_email(self, params: SendEmailParams) -> SendEmailResponse:
        """
        Send one email through the Gmail API.

        Raises:
            MailerNotInitializedError: initialize_client has not succeeded.
        """
        if not self.is_initialized:
            raise MailerNotInitializedError(
                "GmailMailer.initialize_client() must succeed before sending email"
            )

        message = self.build_message(params)
        raw = base64.urlsafe_b64encode(message.as_bytes()).decode("ascii")

        try:
            token = await self._get_access_token()
            response = await self._client.post(
                GMAIL_SEND_URL,
                json={"raw": raw},
                headers={"Authorization": f"Bearer {token}"},
            )
        except (MailerAuthError, httpx.HTTPError, jwt.PyJWTError, ValueError, TypeError) as exc:
            logger.warning(f"Email to {params.recipient_email} was not sent: {exc}")
            return SendEmailResponse(
                sent=False,
                message=f"Error sending email: {exc}",
            )

        body = _json_or_none(response)
        if response.is_success:
            logger.info(
                "Email sent to %s (subject=%r, attachments=%d)",
                params.recipient_email,
                message["Subject"],
                len(params.attachments),
            )
            return SendEmailResponse(
                sent=True,
                status=response.status_code,
                status_text=response.reason_phrase,
                response_url=str(response.url),
                message="Email sent successfully",
                gmail_response=body,
            )

        error_message = _google_error_message(body, response.text)
        logger.warning(
            f"Gmail API rejected email to {params.recipient_email}: "
            f"{response.status_code} {error_message}"
        )
        return SendEmailResponse(
            sent=False,
            status=response.status_code,
            status_text=response.reason_phrase,
            response_url=str(response.url),
            message=f"Error sending email: {error_message}",
            gmail_response=body,
        )

    def build_message(self, params: SendEmailParams) -> EmailMessage:
        """
        Assemble the MIME message for a send request.

        Defaults: sender is the initialized address, sender name is the
        domain of the sender address, subject is "No Subject".
        """
        sender_email = params.sender_email or self.sender_email
        sender_name = params.sender_name or sender_email.split("@", 1)[-1]

        message = EmailMessage()
        message["From"] = formataddr((sender_name, sender_email))
        message["To"] = params.recipient_email
        message["Subject"] = params.subject or DEFAULT_SUBJECT

        subtype = "html" if looks_like_html(params.message) else "plain"
        message.set_content(params.message, subtype=subtype)

        for attachment in params.attachments:
            maintype, _, subtype = attachment.mime_type.partition("/")
            if not maintype or not subtype:
                maintype, subtype = "application", "octet-stream"
            message.add_attachment(
                attachment.decoded(),
                maintype=maintype,
                subtype=subtype,
                filename=attachment.filename,
            )

        return message

    async def _get_access_token(self) -> str:
        """Return a cached access token, fetching a new one when it is about to expire."""
        if self._access_token and time.time() < self._token_expires_at - _TOKEN_EXPIRY_MARGIN_SECONDS:
            return self._access_token

        account = self._service_account
        token_uri = account.get("token_uri") or DEFAULT_TOKEN_URI
        now = int(time.time())
        claims = {
            "iss": account["client_email"],
            "sub": self.sender_email,
            "scope": GMAIL_SEND_SCOPE,
            "aud": token_uri,
            "iat": now,
            "exp": now + _ASSERTION_LIFETIME_SECONDS,
        }
        headers = {"kid": account["private_key_id"]} if account.get("private_key_id") else None
        assertion = jwt.encode(claims, account["private_key"], algorithm="RS256", headers=headers)

        response = await self._client.post(
            token_uri,
            data={"grant_type": JWT_BEARER_GRANT, "assertion": assertion},
        )
        body = _json_or_none(response)
        if response.status_code != 200 or not isinstance(body, dict) or not body.get("access_token"):
            raise MailerAuthError(
                f"Token request failed ({response.status_code}): "
                f"{_google_error_message(body, response.text)}"
            )

        self._access_token = body["access_token"]
        self._token_expires_at = time.time() + int(body.get("expires_in") or 3600)
        return self._access_token

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
