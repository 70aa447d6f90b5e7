"""
Email demo endpoints.

Every endpoint runs one scenario from services.email_examples and returns the
send result tagged with the operation name. A send that Gmail rejected is
still a 200 with ``sent: false``; anything that blows up before or during the
send (unreadable attachment source, transport error) becomes a 500.
"""

import asyncio
import logging
from typing import Awaitable, List

from fastapi import APIRouter, Depends, HTTPException

from mailer_demo import config
from mailer_demo.deps import get_mailer
from mailer_demo.models.email import OperationResult, SendEmailResponse
from mailer_demo.services.email_examples import (
    send_html_email,
    send_html_email_with_attachment,
    send_new_purchase_email,
    send_plain_text_email,
    send_server_status_email,
    send_subscription_renewal_email,
)
from mailer_demo.services.gmail_mailer import GmailMailer

logger = logging.getLogger(__name__)

router = APIRouter()

_SEND_RESPONSES = {
    200: {
        "description": "Send attempted; `sent` tells whether Gmail accepted it",
        "content": {
            "application/json": {
                "example": {
                    "operation": "Send HTML Email",
                    "sent": True,
                    "status": 200,
                    "statusText": "OK",
                    "responseUrl": "https://gmail.googleapis.com/gmail/v1/users/me/messages/send",
                    "message": "Email sent successfully",
                    "gmailResponse": {"id": "18f0c2d4a1b2c3d4", "threadId": "18f0c2d4a1b2c3d4", "labelIds": ["SENT"]},
                }
            }
        },
    },
    500: {"description": "The email could not be built or sent"},
    503: {"description": "Email client failed to initialize"},
}


async def _run(operation: str, send: Awaitable[SendEmailResponse]) -> OperationResult:
    """Await one demo send and wrap the result; unexpected errors become HTTP 500."""
    try:
        result = await send
    except Exception as exc:
        logger.error(f"{operation} failed: {exc}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"{operation} failed: {exc}")

    if not result.sent:
        logger.warning(f"{operation}: email not sent ({result.message})")
    return OperationResult.from_response(operation, result)


@router.get("/send-html-email", response_model=OperationResult, responses=_SEND_RESPONSES)
async def send_html_email_endpoint(mailer: GmailMailer = Depends(get_mailer)):
    """Send the styled HTML activation email."""
    return await _run("Send HTML Email", send_html_email(mailer))


@router.get("/send-plain-text-email", response_model=OperationResult, responses=_SEND_RESPONSES)
async def send_plain_text_email_endpoint(mailer: GmailMailer = Depends(get_mailer)):
    return await _run("Send Plain Text Email", send_plain_text_email(mailer))


@router.get("/send-html-email-attachment", response_model=OperationResult, responses=_SEND_RESPONSES)
async def send_html_email_attachment_endpoint(mailer: GmailMailer = Depends(get_mailer)):
    """Send the StreamBox welcome email with an invoice and a poster attached."""
    return await _run("Send HTML Email with Attachment", send_html_email_with_attachment(mailer))


@router.get("/send-subscription-renewal", response_model=OperationResult, responses=_SEND_RESPONSES)
async def send_subscription_renewal_endpoint(mailer: GmailMailer = Depends(get_mailer)):
    return await _run("Send Subscription Renewal Email", send_subscription_renewal_email(mailer))


@router.get("/send-new-purchase", response_model=OperationResult, responses=_SEND_RESPONSES)
async def send_new_purchase_endpoint(mailer: GmailMailer = Depends(get_mailer)):
    return await _run("Send New Purchase Email", send_new_purchase_email(mailer))


@router.get(
    "/simulate-server-status",
    response_model=List[OperationResult],
    responses={code: doc for code, doc in _SEND_RESPONSES.items() if code != 200},
)
async def simulate_server_status(mailer: GmailMailer = Depends(get_mailer)):
    """
    Simulate a server start followed by a shutdown.

    Sends the start notification, pauses briefly, then sends the shutdown
    notification. Always returns two entries: start first, shutdown second.
    """
    logger.info("[Demo] Simulating server start...")
    start_result = await _run("Server Start", send_server_status_email(mailer, "start"))
    logger.info(f"Server Start Email Send Result: {start_result.sent}")

    await asyncio.sleep(config.SIMULATE_STATUS_DELAY_SECONDS)

    logger.info("[Demo] Simulating server shutdown...")
    stop_result = await _run("Server Shutdown", send_server_status_email(mailer, "shutdown"))
    logger.info(f"Server Shutdown Email Send Result: {stop_result.sent}")

    return [start_result, stop_result]
