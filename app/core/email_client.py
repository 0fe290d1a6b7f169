# app/core/email_client.py
"""
Email client utilities (the mail dispatcher).

Responsibilities:
  - Read SMTP configuration from settings.
  - Provide a single send_email(...) function for services to use.
  - Support both TLS (STARTTLS) and SSL connections.
  - Return the Message-ID of every sent email so callers can track it.

Typical .env configuration (Gmail example with App Password):

    SMTP_HOST=smtp.gmail.com
    SMTP_PORT=465
    SMTP_USERNAME=cards@example.com
    SMTP_PASSWORD=<app password>
    SMTP_FROM_EMAIL=noreply@elitedigitalcards.com
    SMTP_FROM_NAME=Elite Digital Cards
    SMTP_USE_TLS=false
    SMTP_USE_SSL=true
"""

import logging
import mimetypes
import re
import smtplib
from email.message import EmailMessage
from email.utils import formataddr, make_msgid
from typing import Iterable

from app.core.config import get_settings

logger = logging.getLogger(__name__)

_TAG_RE = re.compile(r"<[^>]+>")
_SPACE_RE = re.compile(r"\n\s*\n+")


def _html_to_text(html: str) -> str:
    """Crude plain-text fallback for clients without HTML support."""
    text = _TAG_RE.sub("", html)
    return _SPACE_RE.sub("\n\n", text).strip()


def _create_smtp_client() -> smtplib.SMTP:
    """
    Create and return an SMTP client configured for TLS or SSL.

    Priority:
      - If SMTP_USE_SSL is True → use smtplib.SMTP_SSL (e.g., Gmail on 465).
      - Else → use smtplib.SMTP + optional STARTTLS if SMTP_USE_TLS is True.

    NOTE:
      - You should NOT enable both TLS and SSL at the same time.
    """
    settings = get_settings()
    if not settings.SMTP_HOST:
        raise RuntimeError("SMTP_HOST is not configured. Please set it in .env.")

    if settings.SMTP_USE_SSL:
        server: smtplib.SMTP = smtplib.SMTP_SSL(
            settings.SMTP_HOST, settings.SMTP_PORT, timeout=30
        )
    else:
        server = smtplib.SMTP(settings.SMTP_HOST, settings.SMTP_PORT, timeout=30)
        if settings.SMTP_USE_TLS:
            server.starttls()

    return server


def send_email(
    to_email: str | list[str],
    subject: str,
    html_body: str,
    text_body: str | None = None,
    bcc: list[str] | None = None,
    attachments: Iterable[tuple[str, bytes]] | None = None,
) -> str:
    """
    Send one email.

    Parameters
    ----------
    to_email:
        Recipient address (or list of addresses).
    subject:
        Email subject line.
    html_body:
        HTML body.
    text_body:
        Optional plain-text alternative; derived from the HTML if omitted.
    bcc:
        Optional blind-copy recipients (group mail).
    attachments:
        Optional iterable of (filename, content) pairs.

    Returns
    -------
    The Message-ID header of the sent email.

    Raises
    ------
    RuntimeError:
        If required SMTP configuration is missing.
    smtplib.SMTPException / OSError:
        If the underlying SMTP connection or send fails.
    """
    settings = get_settings()
    if not (settings.SMTP_HOST and settings.SMTP_USERNAME and settings.SMTP_PASSWORD):
        raise RuntimeError(
            "SMTP is not configured correctly. "
            "Please set SMTP_HOST, SMTP_USERNAME, and SMTP_PASSWORD in .env."
        )

    msg = EmailMessage()
    msg["From"] = formataddr((settings.SMTP_FROM_NAME, settings.SMTP_FROM_EMAIL))
    msg["To"] = ", ".join(to_email) if isinstance(to_email, list) else to_email
    if bcc:
        # send_message() delivers to Bcc recipients and strips the header
        msg["Bcc"] = ", ".join(bcc)
    msg["Subject"] = subject

    domain = settings.SMTP_FROM_EMAIL.rsplit("@", 1)[-1] or None
    message_id = make_msgid(domain=domain)
    msg["Message-ID"] = message_id

    msg.set_content(text_body or _html_to_text(html_body))
    msg.add_alternative(html_body, subtype="html")

    for filename, content in attachments or ():
        ctype, _ = mimetypes.guess_type(filename)
        maintype, subtype = (ctype or "application/octet-stream").split("/", 1)
        msg.add_attachment(content, maintype=maintype, subtype=subtype, filename=filename)

    server = _create_smtp_client()
    try:
        server.login(settings.SMTP_USERNAME, settings.SMTP_PASSWORD)
        server.send_message(msg)
    finally:
        try:
            server.quit()
        except smtplib.SMTPException:
            # Connection is being torn down anyway.
            pass

    logger.info("Email sent: %s", message_id)
    return message_id
