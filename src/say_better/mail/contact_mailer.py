"""Contact form: validate a submission and relay it over SMTP."""

from __future__ import annotations

import html
import logging
import os
import smtplib
from dataclasses import dataclass
from email.message import EmailMessage
from email.utils import formataddr

from say_better.config import MailConfig
from say_better.errors import ConfigurationError, ContactValidationError
from say_better.models.contact import ContactMessage

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "email", "message")
HEADER_FIELDS = ("name", "email")  # end up in mail headers
INVALID_HEADER_MESSAGE = "Name and email must be a single line"


@dataclass
class ContactOutcome:
    success: bool
    error: str | None = None


def validate_contact(payload: dict) -> ContactMessage:
    """Return a ContactMessage, or raise if a required field is blank or a header field spans lines."""
    missing = [f for f in REQUIRED_FIELDS if not str(payload.get(f) or "").strip()]
    if missing:
        raise ContactValidationError()
    if any(ch in str(payload[f]).strip() for f in HEADER_FIELDS for ch in "\r\n"):
        raise ContactValidationError(INVALID_HEADER_MESSAGE)
    return ContactMessage(**{f: str(payload[f]).strip() for f in REQUIRED_FIELDS})


class ContactMailer:
    """Sends contact messages from the configured account to itself."""

    def __init__(
        self,
        config: MailConfig | None = None,
        user: str | None = None,
        password: str | None = None,
    ):
        self.config = config or MailConfig()
        self.user = user if user is not None else os.environ.get("GMAIL_USER")
        self.password = password if password is not None else os.environ.get("GMAIL_APP_PASSWORD")

    def build_message(self, contact: ContactMessage) -> EmailMessage:
        if not self.user:
            raise ConfigurationError("GMAIL_USER is not set in environment.")

        msg = EmailMessage()
        # Gmail only relays as the authenticated account; the visitor goes in Reply-To.
        msg["From"] = formataddr((contact.name, self.user))
        msg["To"] = self.user
        msg["Reply-To"] = contact.email
        msg["Subject"] = f"{self.config.subject_prefix} Message from {contact.name}"
        msg.set_content(
            f"Name: {contact.name}\n"
            f"Email: {contact.email}\n\n"
            f"Message:\n{contact.message}\n"
        )
        msg.add_alternative(
            "<h3>New Support Message</h3>\n"
            f"<p><strong>Name:</strong> {html.escape(contact.name)}</p>\n"
            f"<p><strong>Email:</strong> {html.escape(contact.email)}</p>\n"
            "<hr/>\n"
            "<p><strong>Message:</strong></p>\n"
            f'<p style="white-space: pre-wrap;">{html.escape(contact.message)}</p>\n',
            subtype="html",
        )
        return msg

    def send(self, contact: ContactMessage) -> None:
        if not self.user or not self.password:
            logger.error("Missing GMAIL_USER or GMAIL_APP_PASSWORD")
            raise ConfigurationError("GMAIL_USER or GMAIL_APP_PASSWORD is not set in environment.")

        msg = self.build_message(contact)
        with smtplib.SMTP_SSL(self.config.smtp_host, self.config.smtp_port) as smtp:
            smtp.login(self.user, self.password)
            smtp.send_message(msg)
        logger.info("Contact message from %s relayed", contact.email)


def submit_contact(payload: dict, mailer: ContactMailer) -> ContactOutcome:
    """Validate and send a contact form submission. Never raises."""
    try:
        contact = validate_contact(payload)
    except ContactValidationError as e:
        return ContactOutcome(success=False, error=e.user_message)

    try:
        mailer.send(contact)
    except ConfigurationError:
        return ContactOutcome(success=False, error="Server configuration error")
    except (smtplib.SMTPException, OSError, ValueError):
        logger.exception("Error sending email")
        return ContactOutcome(success=False, error="Failed to send email")
    return ContactOutcome(success=True)
