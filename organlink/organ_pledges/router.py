"""
Organ Pledge Router - API endpoints for organ pledges.
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..auth.dependencies import require_roles, MEDICAL_STAFF_ROLES
from ..auth.models import User, UserRole
from .schemas import OrganPledgeCreate, OrganPledgeResponse
from .service import create_organ_pledge, list_organ_pledges

router = APIRouter()

@router.post("", response_model=OrganPledgeResponse, status_code=status.HTTP_201_CREATED)
async def pledge_organ(
    pledge_data: OrganPledgeCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles([UserRole.DONOR], "Only donors can create organ pledges"))
):
    """
    Pledge an organ
    
    The pledge is always owned by the calling donor and starts as available.
    """
    return create_organ_pledge(db, pledge_data, current_user)

@router.get("", response_model=List[OrganPledgeResponse])
async def get_organ_pledges(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles([UserRole.DONOR, *MEDICAL_STAFF_ROLES]))
):
    """
    List organ pledges, newest first
    
    Donors get their own pledges; doctors and admins get available pledges only.
    """
    return list_organ_pledges(db, current_user)
