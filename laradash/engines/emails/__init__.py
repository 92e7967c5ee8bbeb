"""
Email Engine - variables, message composition and template rendering.
"""

from laradash.engines.emails.email_variable import EmailVariable
from laradash.engines.emails.email_sender import EmailMessage, EmailSender
from laradash.engines.emails.template_renderer import EmailTemplateRenderer

__all__ = [
    "EmailVariable",
    "EmailMessage",
    "EmailSender",
    "EmailTemplateRenderer",
]
