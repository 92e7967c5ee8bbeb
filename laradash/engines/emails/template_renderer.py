"""
Email Template Renderer - renders stored email templates.
"""

from typing import Any, Dict, Optional

from laradash.engines.builder.block_renderer import BlockRenderer
from laradash.engines.emails.email_variable import EmailVariable


class EmailTemplateRenderer:
    """Variable substitution plus dynamic block rendering for stored templates."""

    def __init__(self, renderer: BlockRenderer, email_variable: EmailVariable):
        self.renderer = renderer
        self.email_variable = email_variable

    def render_content(self, body_html: Optional[str], context: str = "email") -> str:
        if not body_html:
            return ""
        return self.renderer.process_content(body_html, context)

    def render_template(
        self,
        subject: Optional[str],
        body_html: Optional[str],
        data: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, str]:
        """Replace ``{key}`` in subject and body, then render the body's dynamic blocks."""
        subject = subject or ""
        body_html = body_html or ""
        for key, value in (data or {}).items():
            placeholder = "{" + key + "}"
            subject = subject.replace(placeholder, str(value))
            body_html = body_html.replace(placeholder, str(value))

        return {
            "subject": subject,
            "body_html": self.renderer.process_content(body_html, "email"),
        }

    def preview(self, subject: Optional[str], body_html: Optional[str]) -> Dict[str, str]:
        return self.render_template(subject, body_html, self.email_variable.get_preview_sample_data())
