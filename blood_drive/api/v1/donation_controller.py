"""
Donation Controller
===================

FastAPI controller for donor registration.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status

from blood_drive.api.v1.dependencies import get_donation_service
from blood_drive.application.dto.donation_dto import (
    DonationData,
    DonationRequest,
    DonationResponse,
    DonorSummary,
    ErrorResponse,
)
from blood_drive.application.services.donation_service import DonationService
from blood_drive.domain.exceptions import DonorValidationError, StorageUnavailableError

logger = logging.getLogger(__name__)
router = APIRouter(tags=["donations"])


# Plain ``def`` handlers run in FastAPI's threadpool, so blocking pymongo
# calls from concurrent registrations do not serialize on the event loop.
@router.post(
    "/donate",
    response_model=DonationResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Register a blood donor",
    description="""
    Register a new donor and increment the total blood units.

    1. Every field is validated; all failures are reported together and nothing is stored
    2. The donor is inserted into the 'donors' collection
    3. The 'global' stats document is incremented by one

    If step 3 fails the donor is still stored and the total undercounts by one
    until POST /api/sync-stats is called.
    """
)
def donate(
    request: DonationRequest,
    service: DonationService = Depends(get_donation_service),
) -> DonationResponse:
    """Register a donor."""
    try:
        result = service.register_donor(
            full_name=request.full_name,
            blood_group=request.blood_group,
            age=request.age,
            year=request.year,
        )
    except DonorValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except StorageUnavailableError as e:
        logger.error("Error registering donor: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error. Please try again later."
        )

    return DonationResponse(
        data=DonationData(
            donor=DonorSummary(
                full_name=result.donor.full_name,
                blood_group=result.donor.blood_group,
            ),
            total_units=result.total_units,
        )
    )
