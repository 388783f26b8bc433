"""
Group occupancy endpoints.

``GET /groups`` lists every configured group with its current count,
capacity and a full flag; the front end polls it to draw capacity bars.
``GET /groups/available`` lists only the groups that still have room.
"""

from fastapi import APIRouter, Depends

from registration_api.app.core.config import Settings
from registration_api.app.core.dependencies import get_roster_service, get_settings
from registration_api.app.core.exceptions import ServiceFailure, StoreError
from registration_api.app.schemas.group import AvailableGroupsResponse, GroupsResponse
from registration_api.app.services.roster_service import RosterService

router = APIRouter()

FAILURE_MESSAGE = "Failed to fetch group information"


@router.get("", response_model=GroupsResponse)
def list_groups(roster: RosterService = Depends(get_roster_service)) -> GroupsResponse:
    """Return occupancy for every configured group, in configured order."""
    try:
        statuses = roster.group_statuses()
    except StoreError as exc:
        raise ServiceFailure(FAILURE_MESSAGE) from exc
    return GroupsResponse(groups=statuses)


@router.get("/available", response_model=AvailableGroupsResponse)
def list_available_groups(
    roster: RosterService = Depends(get_roster_service),
    settings: Settings = Depends(get_settings),
) -> AvailableGroupsResponse:
    try:
        available = roster.available_groups(settings.group_names)
    except StoreError as exc:
        raise ServiceFailure(FAILURE_MESSAGE) from exc
    return AvailableGroupsResponse(groups=available)
