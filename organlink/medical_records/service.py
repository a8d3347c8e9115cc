"""
Medical Record Service - Business logic for medical records.
"""
from typing import List
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
import logging

from ..auth.dependencies import MEDICAL_STAFF_ROLES
from ..auth.models import User
from ..exceptions import AuthorizationError, ValidationError, InternalError
from .models import MedicalRecord
from .schemas import MedicalRecordCreate

# Set up logging
logger = logging.getLogger(__name__)

def create_medical_record(db: Session, record_data: MedicalRecordCreate, author: User) -> MedicalRecord:
    """
    Create a medical record written by the caller.
    
    Args:
        db: Database session
        record_data: Validated record fields
        author: Doctor or admin; always recorded as the record's doctor
        
    Returns:
        MedicalRecord: Created record
        
    Raises:
        ValidationError: If the target account does not exist
    """
    record = MedicalRecord(**record_data.model_dump(), doctor_id=author.id)
    db.add(record)
    
    try:
        db.commit()
        db.refresh(record)
        logger.info(f"Medical record {record.id} for user {record.user_id} created by user {author.id}")
        return record
    except IntegrityError as e:
        db.rollback()
        logger.info(f"Rejected medical record from user {author.id}: {str(e.orig)}")
        raise ValidationError("Referenced user does not exist")
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating medical record for user {record_data.user_id}: {str(e)}")
        raise InternalError("Failed to create medical record")

def list_medical_records(db: Session, user_id: str, current_user: User) -> List[MedicalRecord]:
    """
    List the medical records of an account, newest first.
    
    Account holders may read their own records; doctors and admins may read
    anyone's.
    
    Args:
        db: Database session
        user_id: Account whose records are requested
        current_user: Caller's account
        
    Returns:
        List[MedicalRecord]: Records about ``user_id``
        
    Raises:
        AuthorizationError: If the caller may not read these records
    """
    if current_user.id != user_id and current_user.role not in MEDICAL_STAFF_ROLES:
        raise AuthorizationError("Access denied")
    
    return (
        db.query(MedicalRecord)
        .filter(MedicalRecord.user_id == user_id)
        .order_by(MedicalRecord.created_at.desc())
        .all()
    )
