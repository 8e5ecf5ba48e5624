"""
Alert dispatch for reports with errors
Each notifier implements notify(report); failures propagate to the caller
"""
import logging
import smtplib
from email.message import EmailMessage
from typing import Callable, Optional, Protocol

import httpx

from sqlguard.dtos import ValidationReport
from sqlguard.utils.rendering import render_text

logger = logging.getLogger(__name__)

ALERT_SUBJECT = "[SQLGuard Alert] SQL Query Validation Errors"


class Notifier(Protocol):
    """Anything that can deliver a finalized report"""

    def notify(self, report: ValidationReport) -> None:
        ...


class EmailNotifier:
    """Sends the plaintext report over SMTP"""

    name = "email"

    def __init__(
        self,
        to_addr: str,
        from_addr: str,
        smtp_host: str,
        smtp_port: int = 25,
        timeout: float = 10.0
    ):
        self.to_addr = to_addr
        self.from_addr = from_addr
        self.smtp_host = smtp_host
        self.smtp_port = smtp_port
        self.timeout = timeout

    def build_message(self, report: ValidationReport) -> EmailMessage:
        msg = EmailMessage()
        msg["Subject"] = ALERT_SUBJECT
        msg["From"] = self.from_addr
        msg["To"] = self.to_addr
        msg.set_content(render_text(report))
        return msg

    def notify(self, report: ValidationReport) -> None:
        msg = self.build_message(report)
        with smtplib.SMTP(self.smtp_host, self.smtp_port, timeout=self.timeout) as smtp:
            smtp.send_message(msg)
        logger.info(f"Alert email sent to {self.to_addr}")


class WebhookNotifier:
    """POSTs the report as JSON"""

    name = "webhook"

    def __init__(self, url: str, timeout: float = 10.0):
        self.url = url
        self.timeout = timeout

    def notify(self, report: ValidationReport) -> None:
        payload = {
            "subject": ALERT_SUBJECT,
            "text": render_text(report),
            "report": report.model_dump(mode="json"),
        }
        with httpx.Client(timeout=self.timeout) as client:
            response = client.post(self.url, json=payload)
            response.raise_for_status()
        logger.info(f"Alert webhook delivered ({response.status_code})")


class CallableNotifier:
    """Adapts a plain function taking the report"""

    def __init__(self, func: Callable[[ValidationReport], None], name: Optional[str] = None):
        self.func = func
        self.name = name or getattr(func, "__name__", "callable")

    def notify(self, report: ValidationReport) -> None:
        self.func(report)


def build_notifier(settings) -> Optional[Notifier]:
    """
    Build the notifier configured in settings

    Webhook wins over email when both are configured.
    """
    if settings.ALERT_WEBHOOK_URL:
        return WebhookNotifier(settings.ALERT_WEBHOOK_URL, timeout=settings.ALERT_TIMEOUT)

    if settings.ALERT_EMAIL_TO and settings.SMTP_HOST:
        return EmailNotifier(
            to_addr=settings.ALERT_EMAIL_TO,
            from_addr=settings.ALERT_EMAIL_FROM,
            smtp_host=settings.SMTP_HOST,
            smtp_port=settings.SMTP_PORT,
            timeout=settings.ALERT_TIMEOUT,
        )

    return None
