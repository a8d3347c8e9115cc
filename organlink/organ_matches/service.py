"""
Organ Match Service - Business logic for organ matches.

Matches and the requests/pledges they reference are updated independently:
recording or approving a match changes neither the request status nor the
pledge availability.
"""
from typing import List
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
import logging

from ..auth.models import User
from ..core.enums import RequestStatus
from ..core.workflow import is_intended_transition
from ..exceptions import ValidationError, NotFoundError, InternalError
from .models import OrganMatch
from .schemas import OrganMatchCreate, OrganMatchStatusUpdate

# Set up logging
logger = logging.getLogger(__name__)

def create_organ_match(db: Session, match_data: OrganMatchCreate, doctor: User) -> OrganMatch:
    """
    Record a pending match between a request and a pledge.
    
    The referenced rows are not looked up beforehand; the foreign keys reject
    dangling references.
    
    Args:
        db: Database session
        match_data: Validated match fields
        doctor: Doctor or admin recording the match
        
    Returns:
        OrganMatch: Created match
        
    Raises:
        ValidationError: If a referenced request, pledge or account does not exist
    """
    match = OrganMatch(
        **match_data.model_dump(),
        doctor_id=doctor.id,
        status=RequestStatus.PENDING,
    )
    db.add(match)
    
    try:
        db.commit()
        db.refresh(match)
        logger.info(
            f"Organ match {match.id} (request {match.request_id}, pledge {match.pledge_id}, "
            f"score {match.compatibility_score}) created by user {doctor.id}"
        )
        return match
    except IntegrityError as e:
        db.rollback()
        logger.info(f"Rejected organ match from user {doctor.id}: {str(e.orig)}")
        raise ValidationError("Referenced organ request, pledge or account does not exist")
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating organ match for user {doctor.id}: {str(e)}")
        raise InternalError("Failed to create organ match")

def list_potential_matches(db: Session) -> List[OrganMatch]:
    """
    List pending matches, best compatibility score first.
    
    Matches without a score come last; equal scores are ordered newest first.
    
    Args:
        db: Database session
        
    Returns:
        List[OrganMatch]: Pending matches
    """
    return (
        db.query(OrganMatch)
        .filter(OrganMatch.status == RequestStatus.PENDING)
        .order_by(OrganMatch.compatibility_score.desc().nulls_last(), OrganMatch.created_at.desc())
        .all()
    )

def get_organ_match(db: Session, match_id: str) -> OrganMatch:
    """
    Get an organ match by ID.
    
    Raises:
        NotFoundError: If the match does not exist
    """
    match = db.query(OrganMatch).filter(OrganMatch.id == match_id).first()
    if not match:
        raise NotFoundError("Match not found")
    return match

def update_organ_match_status(
    db: Session,
    match_id: str,
    status_data: OrganMatchStatusUpdate,
    approver: User
) -> OrganMatch:
    """
    Overwrite the status of an organ match and record the approver.
    
    Args:
        db: Database session
        match_id: ID of the match
        status_data: New status
        approver: Admin making the change
        
    Returns:
        OrganMatch: Updated match
        
    Raises:
        NotFoundError: If the match does not exist
    """
    match = get_organ_match(db, match_id)
    
    if not is_intended_transition(match.status, status_data.status):
        logger.warning(
            f"Organ match {match_id} moved from {match.status.value if match.status else None} "
            f"to {status_data.status.value} outside the review flow by user {approver.id}"
        )
    
    match.update_status(status_data.status, approver.id)
    
    try:
        db.commit()
        db.refresh(match)
        logger.info(f"Organ match {match_id} status set to {status_data.status.value} by user {approver.id}")
        return match
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error updating organ match {match_id} status: {str(e)}")
        raise InternalError("Failed to update match status")
