"""
Email Sender - composes outgoing messages from a subject and HTML body.

Composition only; delivery belongs to whatever mail transport consumes the
resulting EmailMessage.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel

from laradash.config import Settings, get_settings
from laradash.engines.builder.block_renderer import BlockRenderer
from laradash.engines.emails.email_variable import EmailVariable
from laradash.kernel.hooks import EmailFilterHook, HookManager
from laradash.logging_config import get_logger

logger = get_logger(__name__)


class EmailMessage(BaseModel):
    """A composed email, ready for a mail transport."""

    subject: str
    html: str
    from_email: Optional[str] = None
    from_name: Optional[str] = None
    reply_to_email: Optional[str] = None
    reply_to_name: Optional[str] = None


class EmailSender:
    """
    Builds EmailMessage objects.

    Usage:
        sender = EmailSender(variables, renderer, hooks)
        message = sender.set_subject("Hi {first_name}").set_content(body).get_mail_message(
            variables={"first_name": "Ada"}
        )
    """

    def __init__(
        self,
        email_variable: EmailVariable,
        renderer: BlockRenderer,
        hooks: HookManager,
        settings: Optional[Settings] = None,
    ):
        self.email_variable = email_variable
        self.renderer = renderer
        self.hooks = hooks
        self.settings = settings or get_settings()
        self.subject = ""
        self.content = ""

    def set_subject(self, subject: str) -> "EmailSender":
        self.subject = subject
        return self

    def set_content(self, content: str) -> "EmailSender":
        self.content = content
        return self

    def get_mail_message(
        self,
        from_email: Optional[str] = None,
        variables: Optional[Dict[str, Any]] = None,
    ) -> EmailMessage:
        """
        Compose the message.

        Variables are substituted before dynamic blocks are rendered, so
        placeholder props may reference them.

        Raises:
            Exception: anything raised while composing, after logging it
        """
        try:
            merged = {**self.email_variable.get_replacement_data(), **(variables or {})}
            subject = self.email_variable.replace_variables(self.subject, merged)
            content = self.email_variable.replace_variables(self.content, merged)

            content = self.renderer.process_content(content, "email")

            sender_email = from_email or self.settings.email_from_email or None
            sender_name = (self.settings.email_from_name or None) if sender_email else None
            reply_to_email = self.settings.email_reply_to_email or None
            reply_to_name = (self.settings.email_reply_to_name or None) if reply_to_email else None

            utm_source = self.settings.email_utm_source_default
            if utm_source:
                content = self.email_variable.append_utm_parameters_to_links(
                    content,
                    utm_source,
                    self.settings.email_utm_medium_default or "email",
                )

            subject = self.hooks.apply_filters(EmailFilterHook.EMAIL_SUBJECT, subject)
            content = self.hooks.apply_filters(EmailFilterHook.EMAIL_CONTENT, content)

            return EmailMessage(
                subject=subject,
                html=content,
                from_email=sender_email,
                from_name=sender_name,
                reply_to_email=reply_to_email,
                reply_to_name=reply_to_name,
            )
        except Exception as e:
            logger.error("Failed to send email", extra={"error": str(e), "from_email": from_email})
            raise
