"""
Account Schemas - Pydantic models for account data validation and serialization.
"""
from typing import Optional
from pydantic import Field
from datetime import datetime
from ..core.schemas import CamelModel
from .models import UserRole, BloodType

class AccountUpsert(CamelModel):
    """
    Account Upsert Schema - Identity claims used to provision or refresh an account
    
    Fields:
    - id: Identity-provider subject, used as the account id
    - email: Email claim (optional)
    - first_name / last_name: Name claims (optional)
    - profile_image_url: Avatar claim (optional)
    """
    id: str = Field(..., min_length=1)
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None

class RoleUpdate(CamelModel):
    """
    Role Update Schema - Used when an account holder selects a role
    
    Fields:
    - role: One of patient, donor, doctor, admin
    """
    role: UserRole = Field(..., description="Role chosen by the account holder")

    class Config:
        """Configuration for Pydantic model"""
        json_schema_extra = {
            "example": {
                "role": "donor"
            }
        }

class UserResponse(CamelModel):
    """
    User Response Schema - Full account returned to the account holder
    """
    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    role: Optional[UserRole] = None
    phone_number: Optional[str] = None
    date_of_birth: Optional[datetime] = None
    blood_type: Optional[BloodType] = None
    medical_condition: Optional[str] = None
    weight: Optional[int] = None
    height: Optional[int] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    emergency_contact: Optional[str] = None
    emergency_phone: Optional[str] = None
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
