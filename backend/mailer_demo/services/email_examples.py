"""
Demo email scenarios.

Each function composes one canned email (body, subject, attachments) and
hands it to the injected GmailMailer. Attachment sources are read from the
sample files directory (config.FILES_DIR unless one is passed in); a file
that cannot be read fails the whole send.

  send_html_email                   styled HTML, custom sender name, emoji subject
  send_plain_text_email             plain text, all defaults
  send_html_email_with_attachment   HTML + generated invoice + image file
  send_subscription_renewal_email   HTML + PDF invoice + generated usage stats
  send_new_purchase_email           explicit sender address + EPUB + PDF
  send_server_status_email          start/shutdown notice + history CSV
"""

import logging
from datetime import date, datetime, timedelta
from pathlib import Path
from typing import Literal, Optional

from mailer_demo import config
from mailer_demo.models.email import SendEmailParams, SendEmailResponse
from mailer_demo.services import email_templates
from mailer_demo.services.attachments import (
    append_server_history,
    file_attachment,
    text_attachment,
)
from mailer_demo.services.gmail_mailer import GmailMailer

logger = logging.getLogger(__name__)

ServerStatus = Literal["start", "shutdown"]

SERVER_HISTORY_FILENAME = "ServerHistory.csv"


def _files_dir(files_dir: Optional[Path]) -> Path:
    return Path(files_dir) if files_dir is not None else config.FILES_DIR


async def send_html_email(mailer: GmailMailer) -> SendEmailResponse:
    return await mailer.send_email(
        SendEmailParams(
            recipient_email=config.DEMO_RECIPIENT_EMAIL,
            sender_name="gmail-node-mailer",
            subject="🎉 HTML Email Demo with gmail-node-mailer!",
            message=email_templates.activation_demo_html(),
        )
    )


async def send_plain_text_email(mailer: GmailMailer) -> SendEmailResponse:
    # Sender and sender name fall back to the mailer's defaults
    return await mailer.send_email(
        SendEmailParams(
            recipient_email=config.DEMO_RECIPIENT_EMAIL,
            subject="Plain Text Email Demo: Welcome Aboard!",
            message=email_templates.plain_text_welcome(),
        )
    )


async def send_html_email_with_attachment(
    mailer: GmailMailer,
    files_dir: Optional[Path] = None,
) -> SendEmailResponse:
    """
    StreamBox welcome email with two attachments: an invoice generated in
    memory (HTML) and the movie poster read from disk.
    """
    next_billing_date = date.today() + timedelta(days=30)
    invoice = text_attachment(
        email_templates.streambox_invoice_html(next_billing_date),
        filename="StreamBox-Invoice.html",
        mime_type="text/html",
    )
    poster = file_attachment(
        _files_dir(files_dir) / "downloadableMoviePoster.png",
        filename="MovieWallpaper.png",
        mime_type="image/png",
    )

    return await mailer.send_email(
        SendEmailParams(
            recipient_email=config.DEMO_RECIPIENT_EMAIL,
            sender_name="StreamBox Team",
            subject="🎬 Now Streaming: Short Circuit - Your Adventure Awaits!",
            message=email_templates.streambox_welcome_html(),
            attachments=[invoice, poster],
        )
    )


async def send_subscription_renewal_email(
    mailer: GmailMailer,
    files_dir: Optional[Path] = None,
) -> SendEmailResponse:
    formatted_date = date.today().isoformat()

    invoice = file_attachment(
        _files_dir(files_dir) / "StreamBox-Invoice.pdf",
        filename=f"StreamBox-Invoice-{formatted_date}.pdf",
        mime_type="application/pdf",
    )
    usage_stats = text_attachment(
        email_templates.usage_stats_text(),
        filename=f"StreamBox-Usage-{formatted_date}.txt",
        mime_type="text/plain",
    )

    return await mailer.send_email(
        SendEmailParams(
            recipient_email=config.DEMO_RECIPIENT_EMAIL,
            subject="🎥 StreamBox Subscription Renewed!",
            message=email_templates.subscription_renewal_html(formatted_date),
            attachments=[invoice, usage_stats],
        )
    )


async def send_new_purchase_email(
    mailer: GmailMailer,
    files_dir: Optional[Path] = None,
) -> SendEmailResponse:
    """
    eBook purchase confirmation sent from an explicit sender address, with
    the eBook (EPUB) and the invoice (PDF) attached.
    """
    sender_email = config.PURCHASE_SENDER_EMAIL
    recipient_email = config.DEMO_RECIPIENT_EMAIL
    recipient_name = recipient_email.split("@")[0].capitalize()
    files = _files_dir(files_dir)

    attachments = [
        file_attachment(
            files / "SampleEBook.epub",
            filename="TheEchoesOfTime-eBook.epub",
            mime_type="application/epub+zip",
        ),
        file_attachment(
            files / "SampleInvoice.pdf",
            filename="PurchaseInvoice.pdf",
            mime_type="application/pdf",
        ),
    ]

    return await mailer.send_email(
        SendEmailParams(
            sender_email=sender_email,
            recipient_email=recipient_email,
            subject="📘 Your eBook Purchase Confirmation!",
            message=email_templates.purchase_confirmation_html(
                recipient_name=recipient_name,
                sender_email=sender_email,
                base_url=config.DEFAULT_URL,
            ),
            attachments=attachments,
        )
    )


async def send_server_status_email(
    mailer: GmailMailer,
    status: ServerStatus,
    history_path: Optional[Path] = None,
) -> SendEmailResponse:
    """
    Notify about a server start or shutdown.

    The event is appended to the history CSV (config.SERVER_HISTORY_PATH
    unless one is passed in) first and the whole file is attached to the
    email.

    Raises:
        ValueError: status is not "start" or "shutdown"
    """
    if status not in ("start", "shutdown"):
        raise ValueError(f"status must be 'start' or 'shutdown', got {status!r}")

    formatted_time = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    history_path = Path(history_path) if history_path is not None else config.SERVER_HISTORY_PATH
    append_server_history(history_path, status, formatted_time)
    logger.info(f"Recorded server {status} in {history_path}")

    history = file_attachment(history_path, filename=SERVER_HISTORY_FILENAME, mime_type="text/csv")

    return await mailer.send_email(
        SendEmailParams(
            recipient_email=config.DEMO_RECIPIENT_EMAIL,
            sender_name="Somnus Labs Support",
            subject=f"🖥️ Somnus Labs - Server {status.capitalize()} Status",
            message=email_templates.server_status_html(status, formatted_time),
            attachments=[history],
        )
    )
