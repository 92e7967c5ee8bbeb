"""
CRM Module - contact data for emails and pages.

Contributes:
- crm-contact block: a contact card rendered server-side from placeholder props
- contact_* email variables
- the editor bundle for the block sidebar
"""

from typing import Any, Dict, Optional

from laradash.engines.builder.builder_service import BuilderService
from laradash.engines.builder.save_helpers import create_save
from laradash.engines.builder.style_helpers import esc
from laradash.kernel.hooks import EmailFilterHook
from laradash.kernel.modules.base import ModuleProvider

CONTACT_VARIABLES = {
    "contact_company": ("Contact's company", "Acme Inc."),
    "contact_phone": ("Contact's phone number", "+1 555 0100"),
    "contact_job_title": ("Contact's job title", "Head of Marketing"),
}


def contact_card(props: Dict[str, Any]) -> str:
    accent = esc(props.get("accentColor") or "#635bff")
    name = esc(props.get("contactName") or "")
    if not name:
        return ""

    lines = []
    if props.get("jobTitle"):
        lines.append(esc(props["jobTitle"]))
    if props.get("company"):
        lines.append(esc(props["company"]))
    details = ""
    if lines:
        details = f'<p style="margin: 4px 0 0; color: #6b7280; font-size: 14px;">{" &middot; ".join(lines)}</p>'

    contact = []
    if props.get("contactEmail"):
        email = esc(props["contactEmail"])
        contact.append(f'<a href="mailto:{email}" style="color: {accent}; text-decoration: none;">{email}</a>')
    if props.get("contactPhone"):
        contact.append(esc(props["contactPhone"]))
    contact_html = ""
    if contact:
        contact_html = f'<p style="margin: 8px 0 0; font-size: 14px; color: #374151;">{" | ".join(contact)}</p>'

    return (
        f'<div class="crm-contact-card" style="border-left: 4px solid {accent}; padding: 12px 16px; '
        f'background-color: #f9fafb; border-radius: 6px;">'
        f'<p style="margin: 0; font-weight: 600; font-size: 16px; color: #111827;">{name}</p>'
        f"{details}{contact_html}</div>"
    )


def render_contact(props: Dict[str, Any], context: str = "page", block_id: Optional[str] = None) -> Optional[str]:
    html = contact_card(props)
    return html or None


CRM_CONTACT = {
    "type": "crm-contact",
    "label": "CRM Contact",
    "category": "CRM",
    "icon": "lucide:contact",
    "keywords": ["contact", "crm", "person"],
    "description": "Contact card filled from CRM data",
    "defaultProps": {
        "contactName": "",
        "contactEmail": "",
        "contactPhone": "",
        "company": "",
        "jobTitle": "",
        "accentColor": "#635bff",
    },
    "save": create_save(content=lambda props, options: contact_card(props), type="crm-contact"),
    "isCustom": True,
}


class CrmModule(ModuleProvider):
    """Contact block and contact variables."""

    @property
    def name(self) -> str:
        return "crm"

    @property
    def title(self) -> str:
        return "CRM"

    @property
    def description(self) -> str:
        return "Contact cards and contact variables for emails and pages."

    @property
    def icon(self) -> str:
        return "lucide:users"

    @property
    def tags(self):
        return ["crm", "contacts"]

    def register(self, builder: BuilderService) -> None:
        builder.register_module_block(CRM_CONTACT, script_path="modules/crm/resources/js/blocks")
        builder.register_block_render_callback("crm-contact", render_contact)
        builder.add_filter(EmailFilterHook.TEMPLATE_VARIABLES_DATA, add_contact_variables)


def add_contact_variables(variables: Dict[str, Any]) -> Dict[str, Any]:
    extra = {
        key: {"label": label, "sample_data": sample, "replacement": ""}
        for key, (label, sample) in CONTACT_VARIABLES.items()
    }
    return {**variables, **extra}
