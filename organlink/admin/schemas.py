"""
Admin Schemas - Pydantic models for account administration and statistics.
"""
from typing import Optional
from pydantic import StrictBool
from datetime import datetime
from ..auth.models import UserRole
from ..core.schemas import CamelModel

class UserSummary(CamelModel):
    """
    User Summary Schema - Account listing without profile or medical fields
    """
    id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[UserRole] = None
    is_active: bool
    created_at: Optional[datetime] = None

class UserStatusUpdate(CamelModel):
    """
    User Status Update Schema - Used by admins to (de)activate an account
    
    Fields:
    - is_active: New active flag; must be a JSON boolean
    """
    is_active: StrictBool

class SystemStats(CamelModel):
    """
    System Statistics Schema - All-time counters for the admin dashboard
    
    Fields:
    - total_users: Every account
    - active_donors: Accounts with the donor role
    - pending_requests: Organ requests with status pending
    - successful_matches: Organ matches with status completed
    """
    total_users: int
    active_donors: int
    pending_requests: int
    successful_matches: int
