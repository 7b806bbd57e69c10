"""
Stats Controller
================

FastAPI controller for the blood unit counter: the dashboard poll
endpoint and the drift-repair utility.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status

from blood_drive.api.v1.dependencies import get_donation_service
from blood_drive.application.dto.donation_dto import (
    ErrorResponse,
    StatsData,
    StatsResponse,
    SyncStatsData,
    SyncStatsResponse,
)
from blood_drive.application.services.donation_service import DonationService
from blood_drive.domain.exceptions import StorageUnavailableError

logger = logging.getLogger(__name__)
router = APIRouter(tags=["stats"])


@router.get(
    "/stats",
    response_model=StatsResponse,
    responses={500: {"model": ErrorResponse}},
    summary="Get total blood units",
    description="Current total and last update time. Dashboards poll this every few seconds."
)
def get_stats(
    service: DonationService = Depends(get_donation_service),
) -> StatsResponse:
    """Get the stats aggregate."""
    try:
        stats = service.get_stats()
    except StorageUnavailableError as e:
        logger.error("Error fetching stats: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error fetching statistics"
        )

    return StatsResponse(
        data=StatsData(total_units=stats.total_units, last_updated=stats.last_updated)
    )


@router.post(
    "/sync-stats",
    response_model=SyncStatsResponse,
    responses={500: {"model": ErrorResponse}},
    summary="Sync stats with donor count",
    description="Admin utility: reset the total to the actual number of stored donors."
)
def sync_stats(
    service: DonationService = Depends(get_donation_service),
) -> SyncStatsResponse:
    """Reconcile the stats aggregate."""
    try:
        stats = service.sync_stats()
    except StorageUnavailableError as e:
        logger.error("Error syncing stats: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error syncing statistics"
        )

    return SyncStatsResponse(
        message=f"Stats synced. Total donors: {stats.total_units}",
        data=SyncStatsData(total_units=stats.total_units),
    )
