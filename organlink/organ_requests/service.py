"""
Organ Request Service - Business logic for organ requests.

This module provides service functions for submitting, listing and reviewing
organ requests.
"""
from typing import List
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
import logging

from ..auth.models import User, UserRole
from ..core.enums import RequestStatus
from ..core.workflow import is_intended_transition
from ..exceptions import AuthorizationError, NotFoundError, InternalError
from .models import OrganRequest
from .schemas import OrganRequestCreate, OrganRequestStatusUpdate

# Set up logging
logger = logging.getLogger(__name__)

def create_organ_request(db: Session, request_data: OrganRequestCreate, patient: User) -> OrganRequest:
    """
    Create an organ request owned by the calling patient.
    
    Args:
        db: Database session
        request_data: Validated request fields
        patient: Caller's account; always becomes the owner
        
    Returns:
        OrganRequest: Created request with status pending
    """
    organ_request = OrganRequest(
        **request_data.model_dump(),
        patient_id=patient.id,
        status=RequestStatus.PENDING,
    )
    db.add(organ_request)
    
    try:
        db.commit()
        db.refresh(organ_request)
        logger.info(f"Organ request {organ_request.id} ({organ_request.organ_type.value}) created by patient {patient.id}")
        return organ_request
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating organ request for patient {patient.id}: {str(e)}")
        raise InternalError("Failed to create organ request")

def list_organ_requests(db: Session, current_user: User) -> List[OrganRequest]:
    """
    List the organ requests visible to the caller, newest first.
    
    Patients see their own requests; doctors and admins see all of them.
    
    Args:
        db: Database session
        current_user: Caller's account
        
    Returns:
        List[OrganRequest]: Visible requests
        
    Raises:
        AuthorizationError: For any other role
    """
    query = db.query(OrganRequest)
    
    if current_user.role == UserRole.PATIENT:
        query = query.filter(OrganRequest.patient_id == current_user.id)
    elif current_user.role not in (UserRole.DOCTOR, UserRole.ADMIN):
        raise AuthorizationError("Access denied")
    
    return query.order_by(OrganRequest.created_at.desc()).all()

def get_organ_request(db: Session, request_id: str) -> OrganRequest:
    """
    Get an organ request by ID.
    
    Raises:
        NotFoundError: If the request does not exist
    """
    organ_request = db.query(OrganRequest).filter(OrganRequest.id == request_id).first()
    if not organ_request:
        raise NotFoundError("Organ request not found")
    return organ_request

def update_organ_request_status(
    db: Session,
    request_id: str,
    status_data: OrganRequestStatusUpdate,
    reviewer: User
) -> OrganRequest:
    """
    Overwrite the status of any organ request.
    
    Any status may be written from any status; moves outside the review flow
    are logged but applied. The reviewer is recorded as ``approved_by``.
    
    Args:
        db: Database session
        request_id: ID of the request
        status_data: New status and optional notes
        reviewer: Doctor or admin making the change
        
    Returns:
        OrganRequest: Updated request
        
    Raises:
        NotFoundError: If the request does not exist
    """
    organ_request = get_organ_request(db, request_id)
    previous_status = organ_request.status
    
    if not is_intended_transition(previous_status, status_data.status):
        logger.warning(
            f"Organ request {request_id} moved from {previous_status.value if previous_status else None} "
            f"to {status_data.status.value} outside the review flow by user {reviewer.id}"
        )
    
    organ_request.update_status(status_data.status, reviewer.id, status_data.notes)
    
    try:
        db.commit()
        db.refresh(organ_request)
        logger.info(f"Organ request {request_id} status set to {status_data.status.value} by user {reviewer.id}")
        return organ_request
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error updating organ request {request_id} status: {str(e)}")
        raise InternalError("Failed to update request status")
