"""
Organ Request Schemas - Pydantic models for organ request validation and serialization.

Owner, status and reviewer fields are not accepted from clients; they are set
by the service.
"""
from typing import Optional
from pydantic import Field, field_validator
from datetime import datetime
from ..core.enums import OrganType, PriorityLevel, RequestStatus
from ..core.schemas import CamelModel

class OrganRequestCreate(CamelModel):
    """
    Organ Request Creation Schema - Used when a patient submits a request
    
    Fields:
    - organ_type: Requested organ
    - priority: Clinical urgency
    - medical_reason: Justification, at least 10 characters
    - doctor_notes: Optional notes
    """
    organ_type: OrganType
    priority: PriorityLevel
    medical_reason: str = Field(..., min_length=10, description="Detailed medical reason for the request")
    doctor_notes: Optional[str] = None

    @field_validator("medical_reason", mode="before")
    @classmethod
    def strip_medical_reason(cls, value):
        """Surrounding whitespace does not count towards the minimum length"""
        return value.strip() if isinstance(value, str) else value

class OrganRequestStatusUpdate(CamelModel):
    """
    Organ Request Status Update Schema - Used by doctors and admins
    
    Fields:
    - status: New status, overwrites the stored one
    - notes: Optional reviewer notes
    """
    status: RequestStatus
    notes: Optional[str] = None

    class Config:
        """Configuration for Pydantic model"""
        json_schema_extra = {
            "example": {
                "status": "approved",
                "notes": "Cleared after cross-match review"
            }
        }

class OrganRequestResponse(CamelModel):
    """
    Organ Request Response Schema - Used when returning organ requests
    """
    id: str
    patient_id: str
    organ_type: OrganType
    priority: PriorityLevel
    status: Optional[RequestStatus] = None
    medical_reason: str
    doctor_notes: Optional[str] = None
    approved_by: Optional[str] = None
    rejection_reason: Optional[str] = None
    estimated_wait_time: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
