"""
Organ Pledge Service - Business logic for organ pledges.
"""
from typing import List
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
import logging

from ..auth.models import User, UserRole
from ..exceptions import AuthorizationError, InternalError
from .models import OrganPledge
from .schemas import OrganPledgeCreate

# Set up logging
logger = logging.getLogger(__name__)

def create_organ_pledge(db: Session, pledge_data: OrganPledgeCreate, donor: User) -> OrganPledge:
    """
    Create an available organ pledge owned by the calling donor.
    
    Args:
        db: Database session
        pledge_data: Validated pledge fields
        donor: Caller's account; always becomes the owner
        
    Returns:
        OrganPledge: Created pledge
    """
    pledge = OrganPledge(
        **pledge_data.model_dump(),
        donor_id=donor.id,
        is_available=True,
    )
    db.add(pledge)
    
    try:
        db.commit()
        db.refresh(pledge)
        logger.info(f"Organ pledge {pledge.id} ({pledge.organ_type.value}) created by donor {donor.id}")
        return pledge
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating organ pledge for donor {donor.id}: {str(e)}")
        raise InternalError("Failed to create organ pledge")

def list_organ_pledges(db: Session, current_user: User) -> List[OrganPledge]:
    """
    List the organ pledges visible to the caller, newest first.
    
    Donors see all of their own pledges. Doctors and admins see only pledges
    that are still available.
    
    Args:
        db: Database session
        current_user: Caller's account
        
    Returns:
        List[OrganPledge]: Visible pledges
        
    Raises:
        AuthorizationError: For any other role
    """
    query = db.query(OrganPledge)
    
    if current_user.role == UserRole.DONOR:
        query = query.filter(OrganPledge.donor_id == current_user.id)
    elif current_user.role in (UserRole.DOCTOR, UserRole.ADMIN):
        query = query.filter(OrganPledge.is_available.is_(True))
    else:
        raise AuthorizationError("Access denied")
    
    return query.order_by(OrganPledge.created_at.desc()).all()
