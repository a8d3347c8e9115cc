"""
Organ Request Router - API endpoints for organ requests.
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..auth.dependencies import require_roles, MEDICAL_STAFF_ROLES
from ..auth.models import User, UserRole
from .schemas import OrganRequestCreate, OrganRequestResponse, OrganRequestStatusUpdate
from .service import create_organ_request, list_organ_requests, update_organ_request_status

router = APIRouter()

@router.post("", response_model=OrganRequestResponse, status_code=status.HTTP_201_CREATED)
async def submit_organ_request(
    request_data: OrganRequestCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles([UserRole.PATIENT], "Only patients can create organ requests"))
):
    """
    Submit an organ request
    
    The request is always owned by the calling patient and starts as pending.
    """
    return create_organ_request(db, request_data, current_user)

@router.get("", response_model=List[OrganRequestResponse])
async def get_organ_requests(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles([UserRole.PATIENT, *MEDICAL_STAFF_ROLES]))
):
    """
    List organ requests, newest first
    
    Patients get their own requests; doctors and admins get every request.
    """
    return list_organ_requests(db, current_user)

@router.patch("/{request_id}/status", response_model=OrganRequestResponse)
async def review_organ_request(
    request_id: str,
    status_data: OrganRequestStatusUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(MEDICAL_STAFF_ROLES, "Only doctors and admins can update request status"))
):
    """
    Set the status of an organ request
    
    Any doctor or admin may review any request.
    """
    return update_organ_request_status(db, request_id, status_data, current_user)
