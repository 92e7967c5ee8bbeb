"""
Bundled Modules - modules shipped with the builder.

Each module is disabled until switched on in the statuses file:
- crm: contact card block and contact_* email variables
"""

from laradash.plugins.modules.crm import CrmModule

BUNDLED_MODULES = [CrmModule]

__all__ = [
    "BUNDLED_MODULES",
    "CrmModule",
]
