"""
Admin Service - Account administration and aggregate statistics.
"""
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
import logging

from ..auth.models import User, UserRole
from ..auth.service import get_account
from ..core.enums import RequestStatus
from ..database import utc_now
from ..exceptions import InternalError, ValidationError
from ..organ_matches.models import OrganMatch
from ..organ_requests.models import OrganRequest
from .schemas import SystemStats

# Set up logging
logger = logging.getLogger(__name__)

def list_users(db: Session, role: Optional[UserRole] = None) -> List[User]:
    """
    List accounts, newest first, optionally restricted to one role.
    
    Args:
        db: Database session
        role: Role filter (None for every account)
        
    Returns:
        List[User]: Matching accounts
    """
    query = db.query(User)
    if role is not None:
        query = query.filter(User.role == role)
    return query.order_by(User.created_at.desc()).all()

def update_user_status(db: Session, user_id: str, is_active: bool, admin: User) -> User:
    """
    Set the active flag of any account.
    
    Args:
        db: Database session
        user_id: Target account
        is_active: New active flag
        admin: Admin making the change
        
    Returns:
        User: Updated account
        
    Raises:
        NotFoundError: If the account does not exist
        ValidationError: If an admin tries to deactivate their own account
    """
    user = get_account(db, user_id)
    if user.id == admin.id and not is_active:
        raise ValidationError("Admins cannot deactivate their own account")
    user.is_active = is_active
    user.updated_at = utc_now()
    
    try:
        db.commit()
        db.refresh(user)
        logger.info(f"User {user_id} {'activated' if is_active else 'deactivated'} by admin {admin.id}")
        return user
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error updating status of user {user_id}: {str(e)}")
        raise InternalError("Failed to update user status")

def _count(db: Session, column, *criteria) -> int:
    return db.query(func.count(column)).filter(*criteria).scalar() or 0

def get_system_stats(db: Session) -> SystemStats:
    """
    Compute the dashboard counters from current stored state.
    
    Args:
        db: Database session
        
    Returns:
        SystemStats: All-time totals
    """
    return SystemStats(
        total_users=_count(db, User.id),
        active_donors=_count(db, User.id, User.role == UserRole.DONOR),
        pending_requests=_count(db, OrganRequest.id, OrganRequest.status == RequestStatus.PENDING),
        successful_matches=_count(db, OrganMatch.id, OrganMatch.status == RequestStatus.COMPLETED),
    )
