"""
API v1 routes.
"""

from fastapi import APIRouter

from laradash.api.v1 import builder, emails, modules

router = APIRouter()

router.include_router(builder.router, prefix="/builder", tags=["Builder"])
router.include_router(emails.router, prefix="/emails", tags=["Emails"])
router.include_router(modules.router, prefix="/modules", tags=["Modules"])
