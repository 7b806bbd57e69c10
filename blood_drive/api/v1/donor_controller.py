"""
Donor Controller
================

FastAPI controller for the recent-donors feed.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from blood_drive.api.v1.dependencies import get_app_settings, get_donation_service
from blood_drive.application.dto.donation_dto import DonorListItem, DonorListResponse, ErrorResponse
from blood_drive.application.services.donation_service import DonationService
from blood_drive.core.config import Settings
from blood_drive.domain.models.donor import parse_whole_number
from blood_drive.domain.exceptions import StorageUnavailableError

logger = logging.getLogger(__name__)
router = APIRouter(tags=["donors"])


def resolve_limit(raw: Optional[str], default: int, maximum: int) -> int:
    """
    Turn the ``limit`` query parameter into a usable page size.

    Missing, non-numeric and non-positive values fall back to ``default``;
    large values are capped at ``maximum``.
    """
    limit = parse_whole_number(raw) if raw is not None else None
    if limit is None or limit <= 0:
        return default
    return min(limit, maximum)


@router.get(
    "/donors",
    response_model=DonorListResponse,
    responses={500: {"model": ErrorResponse}},
    summary="List recent donors",
    description="Most recent donors first. Only name, blood group and registration time are exposed."
)
def list_donors(
    limit: Optional[str] = None,
    service: DonationService = Depends(get_donation_service),
    settings: Settings = Depends(get_app_settings),
) -> DonorListResponse:
    """List recent donors."""
    page_size = resolve_limit(limit, settings.donors_default_limit, settings.donors_max_limit)

    try:
        donors = service.list_recent_donors(page_size)
    except StorageUnavailableError as e:
        logger.error("Error fetching donors: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error fetching donors"
        )

    return DonorListResponse(
        data=[
            DonorListItem(
                full_name=donor.full_name,
                blood_group=donor.blood_group,
                donated_at=donor.donated_at,
            )
            for donor in donors
        ]
    )
