from fastapi import HTTPException, status

from invitations.invitation_list.problems import (
    CreateGuestFailure,
    CreateHouseholdFailure,
    FailedToGenerateHouseholdCode,
    GuestNotFound,
    GuestsNotFoundInHousehold,
    GuestWithThatNameAlreadyExists,
    HouseholdAlreadyExists,
    HouseholdNotFound,
    Problem,
    StaleInvitationList,
    UseCaseFailure,
)

NOT_FOUND_PROBLEMS = (HouseholdNotFound, GuestNotFound, GuestsNotFoundInHousehold)
CONFLICT_PROBLEMS = (HouseholdAlreadyExists, GuestWithThatNameAlreadyExists, StaleInvitationList)
BAD_REQUEST_PROBLEMS = (CreateGuestFailure, CreateHouseholdFailure, FailedToGenerateHouseholdCode)


def status_code_for(problem: Problem) -> int:
    """Pick the HTTP status from the problem that stopped the use case."""
    cause = problem.cause if isinstance(problem, UseCaseFailure) and problem.cause else problem
    if isinstance(cause, NOT_FOUND_PROBLEMS):
        return status.HTTP_404_NOT_FOUND
    if isinstance(cause, CONFLICT_PROBLEMS):
        return status.HTTP_409_CONFLICT
    if isinstance(cause, BAD_REQUEST_PROBLEMS):
        return status.HTTP_400_BAD_REQUEST
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def to_http_exception(problem: Problem) -> HTTPException:
    return HTTPException(status_code=status_code_for(problem), detail=problem.to_dict())
