import io
import pytest
import requests
from unittest.mock import patch
from feedpoll.core.config import Settings
from feedpoll.notify.base import BaseNotifier, CompositeNotifier
from feedpoll.notify.console import BORDER, ConsoleNotifier
from feedpoll.notify.factory import build_notifier
from feedpoll.notify.mailer import EmailNotifier
from feedpoll.notify.webhook import WebhookNotifier

class ExplodingNotifier(BaseNotifier):
    def notify(self, title: str, message: str) -> None:
        raise ConnectionRefusedError("smtp down")

class TestConsoleNotifier:
    """Unit tests for the default console sink"""

    def test_bordered_block(self):
        out = io.StringIO()
        ConsoleNotifier(stream=out).notify("Data Fetch Successful", "Data saved to: x.csv")
        lines = out.getvalue().strip("\n").splitlines()
        assert lines == [BORDER, "Data Fetch Successful", "Data saved to: x.csv", BORDER]
        assert BORDER == "=" * 50

    def test_defaults_to_stdout(self, capsys):
        ConsoleNotifier().notify("Title", "Body")
        assert "Title\nBody" in capsys.readouterr().out

class TestCompositeNotifier:
    def test_failing_sink_does_not_block_others(self, notifier, capsys):
        composite = CompositeNotifier([ExplodingNotifier(), notifier])
        composite.notify("Analysis Complete", "done")

        assert notifier.messages == [("Analysis Complete", "done")]
        assert "ExplodingNotifier failed: smtp down" in capsys.readouterr().out

class TestWebhookNotifier:
    @patch("feedpoll.notify.webhook.requests.post")
    def test_posts_json(self, mock_post, make_response):
        mock_post.return_value = make_response(204, b"", reason="No Content")
        WebhookNotifier("https://hooks.test/abc", timeout_sec=3).notify("Data Fetch Failed", "HTTP 503")

        mock_post.assert_called_once_with(
            "https://hooks.test/abc",
            json={"title": "Data Fetch Failed", "message": "HTTP 503"},
            timeout=3,
        )

    @patch("feedpoll.notify.webhook.requests.post")
    def test_error_status_raises(self, mock_post, make_response):
        mock_post.return_value = make_response(500, b"", reason="Server Error")
        with pytest.raises(requests.HTTPError):
            WebhookNotifier("https://hooks.test/abc").notify("t", "m")

class TestEmailNotifier:
    def make(self, use_ssl=True):
        return EmailNotifier(host="smtp.test", port=465, sender="poller@test", recipient="me@test",
                             user="poller@test", password="secret", use_ssl=use_ssl)

    def test_message_fields(self):
        msg = self.make().build_message("Analysis Complete", "Report saved")
        assert msg["Subject"] == "Analysis Complete"
        assert msg["From"] == "poller@test"
        assert msg["To"] == "me@test"
        assert msg.get_content().strip() == "Report saved"

    @patch("feedpoll.notify.mailer.smtplib.SMTP_SSL")
    def test_sends_over_ssl(self, mock_ssl):
        self.make().notify("Title", "Body")
        smtp = mock_ssl.return_value
        mock_ssl.assert_called_once_with("smtp.test", 465, timeout=30)
        smtp.login.assert_called_once_with("poller@test", "secret")
        smtp.send_message.assert_called_once()
        smtp.starttls.assert_not_called()

    @patch("feedpoll.notify.mailer.smtplib.SMTP")
    def test_starttls_when_ssl_disabled(self, mock_smtp):
        self.make(use_ssl=False).notify("Title", "Body")
        mock_smtp.return_value.starttls.assert_called_once()
        mock_smtp.return_value.send_message.assert_called_once()

class TestBuildNotifier:
    def blank_settings(self) -> Settings:
        s = Settings()
        s.SMTP_HOST = None
        s.NOTIFY_EMAIL_TO = None
        s.NOTIFY_WEBHOOK_URL = None
        return s

    def test_console_only_by_default(self):
        composite = build_notifier(self.blank_settings())
        assert [type(s) for s in composite.sinks] == [ConsoleNotifier]

    def test_optional_sinks_when_configured(self):
        s = self.blank_settings()
        s.SMTP_HOST = "smtp.test"
        s.NOTIFY_EMAIL_TO = "me@test"
        s.NOTIFY_EMAIL_FROM = None
        s.SMTP_USER = "poller@test"
        s.NOTIFY_WEBHOOK_URL = "https://hooks.test/abc"

        composite = build_notifier(s)

        assert [type(x) for x in composite.sinks] == [ConsoleNotifier, EmailNotifier, WebhookNotifier]
        assert composite.sinks[1].sender == "poller@test"
        assert isinstance(composite.sinks[0], ConsoleNotifier)
