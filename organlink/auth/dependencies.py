"""
FastAPI dependencies for authentication and authorization.

Identity comes from the bearer token; the role always comes from the stored
account, re-read on every request.
"""
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from typing import List, Optional
from ..database import get_db
from ..exceptions import AuthenticationError, AuthorizationError
from .models import User, UserRole
from .security import verify_token
from .service import get_account

# Bearer scheme; missing credentials are reported as 401 by get_current_user_id
bearer_scheme = HTTPBearer(auto_error=False)

def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)
) -> str:
    """
    Resolve the caller's account id from the bearer token.
    
    Args:
        credentials: Authorization header contents
        
    Returns:
        str: Account id from the ``sub`` claim
        
    Raises:
        AuthenticationError: If the token is missing, invalid or expired
    """
    if credentials is None:
        raise AuthenticationError("Not authenticated")
    
    payload = verify_token(credentials.credentials)
    if not payload:
        raise AuthenticationError("Invalid or expired token")
    
    user_id = payload.get("sub")
    if not user_id:
        raise AuthenticationError("Invalid token payload")
    
    return user_id

def get_current_user(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
) -> User:
    """
    Get the caller's stored account, whatever its role or active flag.
    
    Raises:
        NotFoundError: If no account exists for the token subject
    """
    return get_account(db, user_id)

def get_current_active_user(current_user: User = Depends(get_current_user)) -> User:
    """
    Get the caller's account and verify it has not been deactivated.
    
    Raises:
        AuthorizationError: If the account is inactive
    """
    if not current_user.is_active:
        raise AuthorizationError("Account has been deactivated")
    return current_user

def require_roles(allowed_roles: List[UserRole], message: str = "Access denied"):
    """
    Dependency factory to require specific roles.
    
    A missing account is treated like a role mismatch.
    
    Args:
        allowed_roles: Roles that are allowed access
        message: Error message returned on mismatch
        
    Returns:
        Function that checks the caller's stored role
    """
    def role_checker(
        user_id: str = Depends(get_current_user_id),
        db: Session = Depends(get_db)
    ) -> User:
        user = db.query(User).filter(User.id == user_id).first()
        if not user or user.role not in allowed_roles:
            raise AuthorizationError(message)
        if not user.is_active:
            raise AuthorizationError("Account has been deactivated")
        return user
    return role_checker

# Convenience dependencies shared by several routers
require_admin = require_roles([UserRole.ADMIN], "Admin access required")
MEDICAL_STAFF_ROLES = [UserRole.DOCTOR, UserRole.ADMIN]
