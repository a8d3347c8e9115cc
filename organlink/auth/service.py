"""
Account Service - Business logic for accounts and role selection.
"""
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
import logging

from ..database import utc_now
from ..exceptions import NotFoundError, InternalError
from .models import User, UserRole
from .schemas import AccountUpsert

# Set up logging
logger = logging.getLogger(__name__)

def get_account(db: Session, user_id: str) -> User:
    """
    Get an account by ID.
    
    Args:
        db: Database session
        user_id: ID of the account
        
    Returns:
        User: Stored account
        
    Raises:
        NotFoundError: If the account does not exist
    """
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError("User not found")
    return user

def update_role(db: Session, user: User, role: UserRole) -> User:
    """
    Set the caller's own role.
    
    The selection is meant to happen once, from unset, on first login. A role
    that is already set is overwritten all the same.
    
    Args:
        db: Database session
        user: Caller's account
        role: Selected role
        
    Returns:
        User: Updated account
    """
    previous_role = user.role
    user.role = role
    user.updated_at = utc_now()
    
    try:
        db.commit()
        db.refresh(user)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error updating role for user {user.id}: {str(e)}")
        raise InternalError("Failed to update user role")
    
    if previous_role is not None and previous_role != role:
        logger.warning(f"User {user.id} changed role from {previous_role.value} to {role.value}")
    else:
        logger.info(f"User {user.id} selected role {role.value}")
    return user

def upsert_account(db: Session, account_data: AccountUpsert) -> User:
    """
    Create an account from identity claims, or refresh the stored claims.
    
    Role and active flag are never touched here.
    
    Args:
        db: Database session
        account_data: Identity claims
        
    Returns:
        User: Created or refreshed account
    """
    user = db.query(User).filter(User.id == account_data.id).first()
    claims = account_data.model_dump(exclude={"id"}, exclude_unset=True)
    
    if user is None:
        user = User(id=account_data.id, **claims)
        db.add(user)
    else:
        for field, value in claims.items():
            setattr(user, field, value)
        user.updated_at = utc_now()
    
    try:
        db.commit()
        db.refresh(user)
        logger.info(f"Upserted account {user.id}")
        return user
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error upserting account {account_data.id}: {str(e)}")
        raise InternalError("Failed to save account")
