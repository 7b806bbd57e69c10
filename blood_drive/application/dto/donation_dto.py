"""
Donation DTO
============

Pydantic models for the donation API requests and responses.
JSON field names are camelCase to match the dashboard and form clients;
Python attributes stay snake_case.
"""
from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_serializer

from blood_drive.utils.datetime_utils import to_iso


class CamelModel(BaseModel):
    """Base for DTOs exposed with camelCase aliases."""

    class Config:
        populate_by_name = True


class DonationRequest(CamelModel):
    """
    DTO for a donor submission.

    Fields are loosely typed on purpose: form posts send the age as a
    string, and the registration use case reports every bad field at once
    instead of failing on the first type mismatch.
    """
    full_name: Optional[Any] = Field(None, alias="fullName", description="Donor's full name, at least 2 characters")
    blood_group: Optional[Any] = Field(None, alias="bloodGroup", description="A+, A-, B+, B-, AB+, AB-, O+ or O-")
    age: Optional[Any] = Field(None, description="Age in whole years, 18 to 65")
    year: Optional[Any] = Field(None, description="Academic year: FY, SY, TY or Final Year")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "fullName": "Jane Doe",
                "bloodGroup": "O-",
                "age": 30,
                "year": "SY",
            }
        }


class DonorSummary(CamelModel):
    """Public fields of a freshly registered donor."""
    full_name: str = Field(..., alias="fullName")
    blood_group: str = Field(..., alias="bloodGroup")


class DonationData(CamelModel):
    donor: DonorSummary
    total_units: int = Field(..., alias="totalUnits")


class DonationResponse(CamelModel):
    """DTO for a successful registration."""
    success: bool = True
    message: str = "Donation registered successfully"
    data: DonationData


class StatsData(CamelModel):
    total_units: int = Field(..., alias="totalUnits")
    last_updated: Optional[datetime] = Field(None, alias="lastUpdated")

    @field_serializer("last_updated")
    def serialize_last_updated(self, value: Optional[datetime]) -> Optional[str]:
        return to_iso(value)


class StatsResponse(CamelModel):
    """DTO for the current stats aggregate."""
    success: bool = True
    data: StatsData

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "success": True,
                "data": {"totalUnits": 42, "lastUpdated": "2026-03-14T09:26:53.589Z"},
            }
        }


class DonorListItem(CamelModel):
    """Public view of a donor in the recent-donors feed; age and year are never listed."""
    full_name: str = Field(..., alias="fullName")
    blood_group: str = Field(..., alias="bloodGroup")
    donated_at: Optional[datetime] = Field(None, alias="donatedAt")

    @field_serializer("donated_at")
    def serialize_donated_at(self, value: Optional[datetime]) -> Optional[str]:
        return to_iso(value)


class DonorListResponse(CamelModel):
    """DTO for the recent-donors feed."""
    success: bool = True
    data: List[DonorListItem]


class SyncStatsData(CamelModel):
    total_units: int = Field(..., alias="totalUnits")


class SyncStatsResponse(CamelModel):
    """DTO for a stats reconciliation."""
    success: bool = True
    message: str
    data: SyncStatsData


class ErrorResponse(BaseModel):
    """DTO for every failed request."""
    success: bool = False
    message: str
