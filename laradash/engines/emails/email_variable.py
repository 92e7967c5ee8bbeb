"""
Email Variable - template variable catalogue and substitution.

Variables appear in subjects and bodies as ``{{name}}`` or ``{name}``. Each
catalogue entry carries an editor label, preview sample data and the value
used when an email is actually composed.
"""

import re
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional
from urllib.parse import urlencode

from laradash.config import Settings, get_settings
from laradash.kernel.hooks import EmailFilterHook, HookManager

DOUBLE_BRACE_LEFTOVER = re.compile(r"\{\{[^}]+\}\}")
# Word-shaped only, so inline CSS and data-props JSON survive.
SINGLE_BRACE_LEFTOVER = re.compile(r"\{\s*[A-Za-z_][\w.-]*\s*\}")
HREF_PATTERN = re.compile(r"href=[\"'](.*?)[\"']", re.IGNORECASE)


def format_date(moment: datetime) -> str:
    """'March 5, 2026'"""
    return f"{moment:%B} {moment.day}, {moment.year}"


def format_time(moment: datetime) -> str:
    """'March 5, 2026 at 3:07 PM'"""
    hour = moment.hour % 12 or 12
    return f"{format_date(moment)} at {hour}:{moment:%M} {moment:%p}"


class EmailVariable:
    """
    Email template variables.

    Usage:
        variables = EmailVariable(hooks)
        body = variables.replace_variables(body, {"first_name": "Ada"})
    """

    def __init__(
        self,
        hooks: HookManager,
        settings: Optional[Settings] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.hooks = hooks
        self.settings = settings or get_settings()
        self.clock = clock

    def site_icon_url(self) -> str:
        icon = self.settings.site_icon or "/images/logo/icon.png"
        if icon.startswith(("http://", "https://")):
            return icon
        return f"{self.settings.app_url.rstrip('/')}/{icon.lstrip('/')}"

    def get_all_variables_data(self) -> Dict[str, Dict[str, Any]]:
        """Full catalogue, after the ``email_template_variables_data`` filter."""
        now = self.clock()
        app_name = self.settings.app_name or "Your Company"
        app_url = self.settings.app_url or "https://yourwebsite.com"
        mail_from = self.settings.mail_from_address or "no-reply@example.com"
        icon = self.site_icon_url()
        icon_image = (
            f'<img src="{icon}" alt="Site Icon" style="max-width: 100px;margin: 0px auto;margin-bottom: 5px;">'
        )

        def fixed(label: str, value: Any) -> Dict[str, Any]:
            return {"label": label, "sample_data": value, "replacement": value}

        def dynamic(label: str, sample: str) -> Dict[str, Any]:
            # Filled per recipient by the caller.
            return {"label": label, "sample_data": sample, "replacement": ""}

        variables = {
            "first_name": dynamic("Recipient's first name", "John"),
            "last_name": dynamic("Recipient's last name", "Doe"),
            "full_name": dynamic("Recipient's full name", "John Doe"),
            "username": dynamic("Recipient's username", "johndoe"),
            "email": fixed("Recipient's email address", mail_from),
            "year": fixed("Current year", now.year),
            "date": fixed("Current date", format_date(now)),
            "time": fixed("Current time", format_time(now)),
            "current_year": fixed("Current year", now.year),
            "current_date": fixed("Current date", format_date(now)),
            "current_time": fixed("Current time", format_time(now)),
            "site_icon": fixed("Site Icon URL", icon),
            "site_icon_image": fixed("Site Icon Image Tag", icon_image),
            "app_name": fixed("Application Name", app_name),
            "app_url": fixed("Application URL", app_url),
            "company": fixed("Your company name", app_name),
            "company_name": fixed("Your company name", app_name),
            "company_website": fixed("Your company website URL", app_url),
        }
        return self.hooks.apply_filters(EmailFilterHook.TEMPLATE_VARIABLES_DATA, variables)

    def get_available_variables(self) -> List[Dict[str, str]]:
        return [
            {"label": data["label"], "value": key}
            for key, data in self.get_all_variables_data().items()
        ]

    def get_preview_sample_data(self) -> Dict[str, Any]:
        return {key: data["sample_data"] for key, data in self.get_all_variables_data().items()}

    def get_replacement_data(self) -> Dict[str, Any]:
        return {key: data["replacement"] for key, data in self.get_all_variables_data().items()}

    def replace_variables(self, content: str, variables: Dict[str, Any]) -> str:
        """
        Substitute ``{{key}}`` then ``{key}`` for every variable, then drop
        any placeholders left unmatched.
        """
        for key, value in variables.items():
            clean = str("" if value is None else value).strip()
            content = content.replace("{{" + key + "}}", clean).replace("{" + key + "}", clean)

        content = DOUBLE_BRACE_LEFTOVER.sub("", content)
        return SINGLE_BRACE_LEFTOVER.sub("", content)

    def append_utm_parameters_to_links(self, content: str, utm_source: str, utm_medium: str = "email") -> str:
        params = urlencode({"utm_source": utm_source, "utm_medium": utm_medium})

        def add_params(match: "re.Match[str]") -> str:
            url = match.group(1)
            separator = "&" if "?" in url else "?"
            return f'href="{url}{separator}{params}"'

        return HREF_PATTERN.sub(add_params, content)
