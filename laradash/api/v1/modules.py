"""
Module endpoints - listing and enabling/disabling modules.
"""

from fastapi import APIRouter, HTTPException, status

from laradash.api.deps import Modules
from laradash.schemas.common import ErrorResponse
from laradash.schemas.modules import (
    BulkModulesRequest,
    BulkModulesResponse,
    ModuleListResponse,
    ModuleToggleResponse,
)

router = APIRouter()


@router.get("/", response_model=ModuleListResponse)
async def list_modules(modules: Modules):
    """Known modules with their enabled status."""
    items = modules.list_modules()
    return ModuleListResponse(modules=items, total=len(items))


@router.post(
    "/{name}/toggle",
    response_model=ModuleToggleResponse,
    responses={404: {"model": ErrorResponse, "description": "Unknown module"}},
)
async def toggle_module(name: str, modules: Modules):
    """
    Flip a module's status.

    Takes effect for blocks and hooks on the next application start.
    """
    try:
        new_status = modules.toggle_module_status(name)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ModuleToggleResponse(name=name.strip().lower(), status=new_status)


@router.post("/bulk-activate", response_model=BulkModulesResponse)
async def bulk_activate(request: BulkModulesRequest, modules: Modules):
    return BulkModulesResponse(results=modules.bulk_activate(request.names))


@router.post("/bulk-deactivate", response_model=BulkModulesResponse)
async def bulk_deactivate(request: BulkModulesRequest, modules: Modules):
    return BulkModulesResponse(results=modules.bulk_deactivate(request.names))
