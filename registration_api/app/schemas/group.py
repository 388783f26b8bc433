"""
Pydantic models for group occupancy.

Groups are not stored anywhere; a ``GroupStatus`` is computed on every
request by counting the rows of the registration sheet.
"""

from typing import List

from pydantic import BaseModel, Field


class GroupStatus(BaseModel):
    name: str
    count: int = Field(0, ge=0)
    is_full: bool = Field(False, alias="isFull")
    max_students: int = Field(..., ge=1, alias="maxStudents")

    model_config = {
        "populate_by_name": True,
    }


class GroupsResponse(BaseModel):
    success: bool = True
    groups: List[GroupStatus]


class AvailableGroupsResponse(BaseModel):
    success: bool = True
    groups: List[str]
