"""
Email schemas.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class EmailVariableOption(BaseModel):
    """A variable offered in the editor's variable picker."""

    label: str
    value: str


class EmailPreviewRequest(BaseModel):
    subject: str = ""
    body_html: str = ""


class RenderedTemplate(BaseModel):
    subject: str
    body_html: str


class EmailComposeRequest(BaseModel):
    """Compose a message from a subject and HTML body."""

    subject: str = Field(..., max_length=500)
    content: str = ""
    variables: Dict[str, Any] = {}
    from_email: Optional[str] = None


class TemplateDesignRequest(BaseModel):
    """Email template built from blocks."""

    name: str = Field(..., min_length=1, max_length=255)
    subject: str = Field(..., max_length=500)
    type: str = "custom"
    description: str = ""
    blocks: List[Dict[str, Any]] = []
    is_active: bool = False
