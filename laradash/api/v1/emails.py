"""
Email endpoints - variables, previews, message composition and template design.
"""

from typing import Any, Dict, List

from fastapi import APIRouter

from laradash.api.deps import Blocks, Builder, Sender, TemplateRenderer, Variables
from laradash.engines.emails.email_sender import EmailMessage
from laradash.schemas.email import (
    EmailComposeRequest,
    EmailPreviewRequest,
    EmailVariableOption,
    RenderedTemplate,
    TemplateDesignRequest,
)

router = APIRouter()


@router.get("/variables", response_model=List[EmailVariableOption])
async def list_variables(variables: Variables):
    """Variables offered by the editor's variable picker."""
    return variables.get_available_variables()


@router.get("/variables/sample")
async def sample_data(variables: Variables) -> Dict[str, Any]:
    return variables.get_preview_sample_data()


# Preview and compose render placeholders, which may fetch remote markdown.
@router.post("/preview", response_model=RenderedTemplate)
def preview(request: EmailPreviewRequest, renderer: TemplateRenderer):
    """Render a template with sample variable data."""
    return renderer.preview(request.subject, request.body_html)


@router.post("/compose", response_model=EmailMessage)
def compose(request: EmailComposeRequest, sender: Sender):
    return (
        sender.set_subject(request.subject)
        .set_content(request.content)
        .get_mail_message(from_email=request.from_email, variables=request.variables)
    )


@router.post("/templates/design")
async def design_template(request: TemplateDesignRequest, builder: Builder, blocks: Blocks) -> Dict[str, Any]:
    """
    Template data for a block design.

    body_html comes from the email adapter; the design JSON keeps the blocks
    and the default canvas settings for re-editing.
    """
    data = blocks.create_template_data(
        name=request.name,
        subject=request.subject,
        template_type=request.type,
        description=request.description,
        blocks=request.blocks,
        is_active=request.is_active,
    )
    data["body_html"] = builder.generate_html(
        "email",
        request.blocks,
        data["design_json"]["canvasSettings"],
    )
    data["created_at"] = data["created_at"].isoformat()
    data["updated_at"] = data["updated_at"].isoformat()
    return builder.prepare_save_data(data)
