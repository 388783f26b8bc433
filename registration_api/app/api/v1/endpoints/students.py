"""
Roster endpoint.

Returns every registered student.  The list is not paginated and the
endpoint is not protected; it is meant for the organisers' own page.
"""

from fastapi import APIRouter, Depends

from registration_api.app.core.dependencies import get_roster_service
from registration_api.app.core.exceptions import ServiceFailure, StoreError
from registration_api.app.schemas.student import StudentsResponse
from registration_api.app.services.roster_service import RosterService

router = APIRouter()

FAILURE_MESSAGE = "Failed to fetch students"


@router.get("", response_model=StudentsResponse)
def list_students(roster: RosterService = Depends(get_roster_service)) -> StudentsResponse:
    try:
        students = roster.list_students()
    except StoreError as exc:
        raise ServiceFailure(FAILURE_MESSAGE) from exc
    return StudentsResponse(students=students)
