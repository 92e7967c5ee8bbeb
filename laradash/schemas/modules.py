"""
Module schemas.
"""

from typing import Dict, List

from pydantic import BaseModel, Field

from laradash.kernel.modules.base import ModuleInfo


class ModuleListResponse(BaseModel):
    modules: List[ModuleInfo]
    total: int


class ModuleToggleResponse(BaseModel):
    name: str
    status: bool


class BulkModulesRequest(BaseModel):
    names: List[str] = Field(..., min_length=1)


class BulkModulesResponse(BaseModel):
    results: Dict[str, bool]
