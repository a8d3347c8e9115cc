"""
Organ Pledge Schemas - Pydantic models for organ pledge validation and serialization.
"""
from typing import Optional
from datetime import datetime
from ..core.enums import OrganType, DonationType
from ..core.schemas import CamelModel

class OrganPledgeCreate(CamelModel):
    """
    Organ Pledge Creation Schema - Used when a donor pledges an organ
    
    Fields:
    - organ_type: Pledged organ
    - donation_type: living or posthumous
    - medical_notes: Optional notes
    """
    organ_type: OrganType
    donation_type: DonationType
    medical_notes: Optional[str] = None

    class Config:
        """Configuration for Pydantic model"""
        json_schema_extra = {
            "example": {
                "organType": "kidney",
                "donationType": "living",
                "medicalNotes": "Blood type O+, no chronic conditions"
            }
        }

class OrganPledgeResponse(CamelModel):
    """
    Organ Pledge Response Schema - Used when returning organ pledges
    """
    id: str
    donor_id: str
    organ_type: OrganType
    donation_type: DonationType
    is_available: bool
    medical_notes: Optional[str] = None
    approved_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
