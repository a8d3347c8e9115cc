"""
Medical Record Router - API endpoints for medical records.
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..auth.dependencies import get_current_active_user, require_roles, MEDICAL_STAFF_ROLES
from ..auth.models import User
from .schemas import MedicalRecordCreate, MedicalRecordResponse
from .service import create_medical_record, list_medical_records

router = APIRouter()

@router.post("", response_model=MedicalRecordResponse, status_code=status.HTTP_201_CREATED)
async def add_medical_record(
    record_data: MedicalRecordCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(MEDICAL_STAFF_ROLES, "Only medical professionals can create records"))
):
    """
    Create a medical record about an account
    """
    return create_medical_record(db, record_data, current_user)

@router.get("/{user_id}", response_model=List[MedicalRecordResponse])
async def get_medical_records(
    user_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user)
):
    """
    List an account's medical records, newest first
    
    Callers may read their own records; doctors and admins may read any.
    """
    return list_medical_records(db, user_id, current_user)
