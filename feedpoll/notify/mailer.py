import smtplib
from email.message import EmailMessage
from typing import Optional

from .base import BaseNotifier

class EmailNotifier(BaseNotifier):
    """Send each notification as a plain-text email over SMTP"""

    def __init__(
        self,
        host: str,
        port: int,
        sender: str,
        recipient: str,
        user: Optional[str] = None,
        password: Optional[str] = None,
        use_ssl: bool = True,
        timeout_sec: float = 30,
    ):
        self.host = host
        self.port = port
        self.sender = sender
        self.recipient = recipient
        self.user = user
        self.password = password
        self.use_ssl = use_ssl
        self.timeout_sec = timeout_sec

    def build_message(self, title: str, message: str) -> EmailMessage:
        msg = EmailMessage()
        msg["Subject"] = title
        msg["From"] = self.sender
        msg["To"] = self.recipient
        msg.set_content(message)
        return msg

    def notify(self, title: str, message: str) -> None:
        msg = self.build_message(title, message)
        if self.use_ssl:
            smtp = smtplib.SMTP_SSL(self.host, self.port, timeout=self.timeout_sec)
        else:
            smtp = smtplib.SMTP(self.host, self.port, timeout=self.timeout_sec)
        with smtp:
            if not self.use_ssl:
                smtp.starttls()
            if self.user and self.password:
                smtp.login(self.user, self.password)
            smtp.send_message(msg)
