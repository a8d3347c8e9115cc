"""
Medical Record Schemas - Pydantic models for medical record validation and serialization.
"""
from typing import List, Optional
from pydantic import Field
from datetime import datetime
from ..core.schemas import CamelModel

class MedicalRecordCreate(CamelModel):
    """
    Medical Record Creation Schema - Used by doctors and admins
    
    Fields:
    - user_id: Account the record is about
    - record_type: e.g. evaluation, test_result, checkup
    - description: Record body
    - results: Optional results text
    - attachments: Optional list of attachment references
    """
    user_id: str = Field(..., min_length=1)
    record_type: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    results: Optional[str] = None
    attachments: Optional[List[str]] = None

class MedicalRecordResponse(CamelModel):
    """
    Medical Record Response Schema - Used when returning medical records
    """
    id: str
    user_id: str
    record_type: str
    description: str
    results: Optional[str] = None
    doctor_id: Optional[str] = None
    attachments: Optional[List[str]] = None
    created_at: Optional[datetime] = None
