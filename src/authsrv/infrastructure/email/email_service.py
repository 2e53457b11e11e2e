"""SMTP delivery of password reset mails."""

import logging
import smtplib
import ssl
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from authsrv_config.settings import Settings

logger = logging.getLogger(__name__)

PASSWORD_RESET_SUBJECT = "Reset your password"

PASSWORD_RESET_TEXT = """Hello,

Someone asked to reset the password of the account registered with this
address. Open the link below within {expire_hours} hour(s) to choose a new one:

{reset_link}

If this wasn't you, ignore this mail; your password stays unchanged.
"""

PASSWORD_RESET_HTML = """<!DOCTYPE html>
<html>
<head><meta charset="utf-8"></head>
<body style="font-family: sans-serif; color: #1f2937;">
    <p>Someone asked to reset the password of the account registered with this address.</p>
    <p>The link below is valid for {expire_hours} hour(s):</p>
    <p><a href="{reset_link}">Choose a new password</a></p>
    <p style="color: #6b7280; font-size: 13px;">{reset_link}</p>
    <p style="color: #6b7280; font-size: 13px;">If this wasn't you, ignore this mail.</p>
</body>
</html>
"""


class EmailService:
    """Sends mail through the configured SMTP relay.

    With ``smtp_enabled`` false nothing is sent and the call only logs.
    """

    def __init__(self, settings: Settings):
        self._settings = settings

    @property
    def enabled(self) -> bool:
        return self._settings.smtp_enabled

    def _create_message(
        self,
        to_email: str,
        subject: str,
        text_body: str,
        html_body: str | None = None,
    ) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = f"{self._settings.smtp_from_name} <{self._settings.smtp_from_email}>"
        msg["To"] = to_email

        msg.attach(MIMEText(text_body, "plain"))
        if html_body:
            msg.attach(MIMEText(html_body, "html"))

        return msg

    def _open_connection(self) -> smtplib.SMTP:
        settings = self._settings
        if settings.smtp_use_tls and not settings.smtp_starttls:
            # Implicit TLS (port 465)
            return smtplib.SMTP_SSL(
                settings.smtp_host,
                settings.smtp_port,
                context=ssl.create_default_context(),
            )

        server = smtplib.SMTP(settings.smtp_host, settings.smtp_port)
        if settings.smtp_starttls:
            server.starttls(context=ssl.create_default_context())
        return server

    def _send_email(self, to_email: str, message: MIMEMultipart) -> None:
        if not self._settings.smtp_host:
            logger.error("SMTP host not configured, mail to %s dropped", to_email)
            return

        smtp_password = (
            self._settings.smtp_password.get_secret_value()
            if self._settings.smtp_password
            else ""
        )

        with self._open_connection() as server:
            if self._settings.smtp_user:
                server.login(self._settings.smtp_user, smtp_password)
            server.send_message(message)

        logger.info("Email sent to %s", to_email)

    def send_password_reset_email(self, to_email: str, reset_link: str) -> None:
        """
        Send the reset link to ``to_email``.

        Raises
        ------
        smtplib.SMTPException, OSError
            If the relay rejects the mail or cannot be reached
        """
        if not self.enabled:
            logger.warning("SMTP disabled, password reset mail to %s not sent", to_email)
            return

        expire_hours = self._settings.reset_token_expire_hours
        message = self._create_message(
            to_email=to_email,
            subject=PASSWORD_RESET_SUBJECT,
            text_body=PASSWORD_RESET_TEXT.format(
                reset_link=reset_link,
                expire_hours=expire_hours,
            ),
            html_body=PASSWORD_RESET_HTML.format(
                reset_link=reset_link,
                expire_hours=expire_hours,
            ),
        )
        self._send_email(to_email, message)
