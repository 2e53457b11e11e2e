from authsrv.infrastructure.email.email_service import EmailService

__all__ = [
    "EmailService",
]
