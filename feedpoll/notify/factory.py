from feedpoll.core.config import Settings, settings
from .base import BaseNotifier, CompositeNotifier
from .console import ConsoleNotifier
from .mailer import EmailNotifier
from .webhook import WebhookNotifier

def build_notifier(source: Settings = settings) -> BaseNotifier:
    """Console is always on; email and webhook sinks join when configured"""
    sinks = [ConsoleNotifier()]

    if source.SMTP_HOST and source.NOTIFY_EMAIL_TO:
        sinks.append(EmailNotifier(
            host=source.SMTP_HOST,
            port=source.SMTP_PORT,
            sender=source.NOTIFY_EMAIL_FROM or source.SMTP_USER or source.NOTIFY_EMAIL_TO,
            recipient=source.NOTIFY_EMAIL_TO,
            user=source.SMTP_USER,
            password=source.SMTP_PASSWORD,
            use_ssl=source.SMTP_USE_SSL,
            timeout_sec=source.REQUEST_TIMEOUT,
        ))

    if source.NOTIFY_WEBHOOK_URL:
        sinks.append(WebhookNotifier(source.NOTIFY_WEBHOOK_URL, timeout_sec=source.REQUEST_TIMEOUT))

    return CompositeNotifier(sinks)
