"""
FastAPI dependencies.
"""

from fastapi import HTTPException, Request

from mailer_demo.services.gmail_mailer import GmailMailer


def get_mailer(request: Request) -> GmailMailer:
    """
    Return the mail client created at startup.

    Raises:
        HTTPException: 503 if the client failed to initialize (missing
        credentials, rejected service account, ...). The detail carries the
        initialization message.
    """
    mailer = getattr(request.app.state, "mailer", None)
    if mailer is None:
        reason = getattr(request.app.state, "mailer_message", None) or "Email client is not initialized"
        raise HTTPException(status_code=503, detail=reason)
    return mailer
