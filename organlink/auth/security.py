"""
Bearer token helpers.

Tokens are issued by the identity provider and signed with the shared secret.
Only the ``sub`` claim (account id) is read; role claims are ignored.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
from jose import jwt, JWTError
import logging

from ..config import settings

# Set up logging
logger = logging.getLogger(__name__)

def create_access_token(account_id: str, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a signed access token for an account.
    
    Used for local development and tests; production tokens come from the
    identity provider.
    
    Args:
        account_id: Account id stored in the ``sub`` claim
        expires_delta: Token lifetime (defaults to the configured lifetime)
        
    Returns:
        str: Encoded JWT token
    """
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    to_encode = {"sub": account_id, "exp": expire}
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)

def verify_token(token: str) -> Optional[Dict[str, Any]]:
    """
    Verify and decode a JWT token.
    
    Args:
        token: JWT token string
        
    Returns:
        Dict containing token payload if valid, None if invalid
    """
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError as e:
        logger.info(f"Rejected bearer token: {str(e)}")
        return None
