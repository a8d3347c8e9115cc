"""
Admin Router - Account administration and dashboard statistics.

Every endpoint here requires the admin role.
"""
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..auth.dependencies import require_admin
from ..auth.models import User, UserRole
from ..auth.schemas import UserResponse
from .schemas import SystemStats, UserStatusUpdate, UserSummary
from .service import get_system_stats, list_users, update_user_status

router = APIRouter()

@router.get("/users", response_model=List[UserSummary])
async def get_all_users(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """
    List every account
    """
    return list_users(db)

@router.get("/users/{role}", response_model=List[UserSummary])
async def get_users_by_role(
    role: UserRole,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """
    List the accounts holding one role
    """
    return list_users(db, role)

@router.patch("/users/{user_id}/status", response_model=UserResponse)
async def set_user_status(
    user_id: str,
    status_data: UserStatusUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """
    Activate or deactivate an account
    """
    return update_user_status(db, user_id, status_data.is_active, current_user)

@router.get("/stats", response_model=SystemStats)
async def get_stats(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """
    Get all-time counters for the admin dashboard
    """
    return get_system_stats(db)
