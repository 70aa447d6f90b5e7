"""
Gmail Mailer Demo Server
FastAPI application that showcases sending email through the Gmail API:
HTML, plain text, attachments, purchase/renewal receipts and server status
notifications, triggered from a small static front-end.
"""

import logging
import os
import threading
import webbrowser
from typing import List

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from mailer_demo import config
from mailer_demo.routers import emails, info
from mailer_demo.services.email_examples import send_server_status_email
from mailer_demo.services.mail_client import initialize_email_client

# Configure logging to output to console
logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Gmail Mailer Demo Server",
    description="Live demonstration of sending email through the Gmail API",
    version="1.0.0",
)


def get_cors_origins() -> List[str]:
    """
    Build the list of allowed CORS origins.

    Always includes the configured DEFAULT_URL and its localhost form.
    Additional origins are read from the CORS_ORIGINS environment variable
    as a comma-separated list. Duplicates are removed while preserving order.
    """
    always_included = [
        config.DEFAULT_URL,
        f"http://localhost:{config.PORT}",
        f"http://127.0.0.1:{config.PORT}",
    ]

    extra_origins: List[str] = []
    cors_env = os.getenv("CORS_ORIGINS", "").strip()
    if cors_env:
        extra_origins = [o.strip() for o in cors_env.split(",") if o.strip()]

    seen: set = set()
    origins: List[str] = []
    for origin in always_included + extra_origins:
        if origin not in seen:
            seen.add(origin)
            origins.append(origin)

    return origins


app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(emails.router, tags=["emails"])
app.include_router(info.router, tags=["info"])


@app.get("/health")
async def health():
    mailer_ready = getattr(app.state, "mailer", None) is not None
    return {"status": "ok", "mailer": "ready" if mailer_ready else "unavailable"}


# Static mounts go last so the API routes above win (/files is a JSON listing,
# /files/<name> is the raw file)
app.mount("/files", StaticFiles(directory=config.FILES_DIR, check_dir=False), name="files")
app.mount("/", StaticFiles(directory=config.PUBLIC_DIR, html=True, check_dir=False), name="public")


@app.on_event("startup")
async def initialize_mailer() -> None:
    """
    Create the Gmail client and keep it on app.state for the routes.

    A failed initialization is logged, not raised: the front-end still loads
    and the email endpoints answer 503 with the reason.
    """
    result = await initialize_email_client()
    app.state.mailer = result.gmail_client
    app.state.mailer_message = result.message

    if result.status:
        logger.info(result.message)
    else:
        logger.error(result.message)

    logger.info("Gmail Mailer Demo Server running at: %s", config.DEFAULT_URL)

    if config.SEND_LIFECYCLE_EMAILS and app.state.mailer is not None:
        await _send_lifecycle_email("start")


@app.on_event("shutdown")
async def close_mailer() -> None:
    logger.info("Server is shutting down...")
    mailer = getattr(app.state, "mailer", None)
    if mailer is not None:
        if config.SEND_LIFECYCLE_EMAILS:
            await _send_lifecycle_email("shutdown")
        await mailer.aclose()
        app.state.mailer = None
    logger.info("HTTP server closed.")


async def _send_lifecycle_email(status: str) -> None:
    try:
        result = await send_server_status_email(app.state.mailer, status)
    except Exception as exc:
        logger.error(f"Server {status} email failed: {exc}")
        return
    logger.info(f"Server {status} email send result: {result.sent}")


def _open_browser(url: str) -> None:
    try:
        webbrowser.open(url)
    except webbrowser.Error as exc:
        logger.error(f"Failed to open browser: {exc}")


def main() -> None:
    """Run the demo server with uvicorn and open the front-end in a browser."""
    if config.OPEN_BROWSER:
        # Give uvicorn a moment to bind before the browser asks for the page
        threading.Timer(1.0, _open_browser, args=[f"http://localhost:{config.PORT}"]).start()
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
