"""
Organ Match Schemas - Pydantic models for organ match validation and serialization.
"""
from typing import Optional
from pydantic import Field
from datetime import datetime
from ..core.enums import RequestStatus
from ..core.schemas import CamelModel

class OrganMatchCreate(CamelModel):
    """
    Organ Match Creation Schema - Used when a doctor records a candidate match
    
    Fields:
    - request_id: Organ request being matched
    - pledge_id: Organ pledge being matched
    - compatibility_score: 0-100, supplied by the doctor (optional)
    - recommended_by: Account recommending the match (optional)
    - notes: Free-text notes (optional)
    """
    request_id: str = Field(..., min_length=1)
    pledge_id: str = Field(..., min_length=1)
    compatibility_score: Optional[int] = Field(None, ge=0, le=100)
    recommended_by: Optional[str] = None
    notes: Optional[str] = None

class OrganMatchStatusUpdate(CamelModel):
    """
    Organ Match Status Update Schema - Used by admins
    
    Fields:
    - status: New status, overwrites the stored one
    """
    status: RequestStatus

class OrganMatchResponse(CamelModel):
    """
    Organ Match Response Schema - Used when returning organ matches
    """
    id: str
    request_id: str
    pledge_id: str
    compatibility_score: Optional[int] = None
    doctor_id: Optional[str] = None
    status: Optional[RequestStatus] = None
    recommended_by: Optional[str] = None
    approved_by: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
