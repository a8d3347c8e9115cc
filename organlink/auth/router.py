"""
Account Router - Current-account lookup and first-login role selection.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from .dependencies import get_current_user
from .models import User
from .schemas import RoleUpdate, UserResponse
from .service import update_role

router = APIRouter()

@router.get("/user", response_model=UserResponse)
async def read_current_user(current_user: User = Depends(get_current_user)):
    """
    Get the caller's account
    
    Available to deactivated accounts and to accounts without a role.
    """
    return current_user

@router.patch("/role", response_model=UserResponse)
async def select_role(
    role_data: RoleUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Set the caller's own role
    
    Intended for first login; a role that is already set is overwritten.
    """
    return update_role(db, current_user, role_data.role)
