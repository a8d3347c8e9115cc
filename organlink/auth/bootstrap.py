"""
Bootstrap utilities for first admin creation.
Promotes the account named in the environment to admin when no admin exists.
"""
import logging
from sqlalchemy.orm import Session
from .models import User, UserRole
from .schemas import AccountUpsert
from .service import upsert_account, update_role
from ..config import settings

logger = logging.getLogger(__name__)

def admin_exists(db: Session) -> bool:
    """
    Check if any active admin account exists in the database.
    
    Args:
        db: Database session
        
    Returns:
        bool: True if at least one active admin exists, False otherwise
    """
    return (
        db.query(User)
        .filter(User.role == UserRole.ADMIN, User.is_active.is_(True))
        .count() > 0
    )

def bootstrap_admin_if_needed(db: Session) -> bool:
    """
    Create the first admin account from environment variables if needed.
    This function should be called during application startup.
    
    Args:
        db: Database session
        
    Returns:
        bool: True if an admin account was provisioned
    """
    if admin_exists(db):
        logger.info("Active admin accounts found. Bootstrap not needed.")
        return False
    
    if not settings.bootstrap_admin_id:
        logger.warning("No active admin accounts found and BOOTSTRAP_ADMIN_ID is not set; skipping bootstrap.")
        return False
    
    admin = db.query(User).filter(User.id == settings.bootstrap_admin_id).first()
    if admin is None:
        claims = {"id": settings.bootstrap_admin_id, "first_name": "System", "last_name": "Administrator"}
        if settings.bootstrap_admin_email:
            claims["email"] = settings.bootstrap_admin_email
        admin = upsert_account(db, AccountUpsert(**claims))
    elif not admin.is_active:
        logger.warning(f"Reactivating bootstrap admin account {admin.id}")
        admin.is_active = True
    update_role(db, admin, UserRole.ADMIN)
    logger.info(f"Bootstrap admin provisioned: {admin.full_name} (ID: {admin.id})")
    return True
