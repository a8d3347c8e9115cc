"""
Organ Match Router - API endpoints for organ matches.
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..auth.dependencies import require_roles, require_admin, MEDICAL_STAFF_ROLES
from ..auth.models import User
from .schemas import OrganMatchCreate, OrganMatchResponse, OrganMatchStatusUpdate
from .service import create_organ_match, list_potential_matches, update_organ_match_status

router = APIRouter()

@router.post("", response_model=OrganMatchResponse, status_code=status.HTTP_201_CREATED)
async def record_organ_match(
    match_data: OrganMatchCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(MEDICAL_STAFF_ROLES, "Only doctors and admins can create matches"))
):
    """
    Record a candidate match between an organ request and an organ pledge
    
    The calling doctor is recorded on the match, which starts as pending.
    """
    return create_organ_match(db, match_data, current_user)

@router.get("", response_model=List[OrganMatchResponse])
async def get_potential_matches(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(MEDICAL_STAFF_ROLES, "Only doctors and admins can view matches"))
):
    """
    List pending matches, best compatibility score first
    """
    return list_potential_matches(db)

@router.patch("/{match_id}/status", response_model=OrganMatchResponse)
async def review_organ_match(
    match_id: str,
    status_data: OrganMatchStatusUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """
    Set the status of an organ match
    
    Admin only. The underlying request and pledge are left unchanged.
    """
    return update_organ_match_status(db, match_id, status_data, current_user)
