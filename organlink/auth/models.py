"""
Account Model - Stores every account in the system together with its role.

The role starts unset and is chosen by the account holder on first login.
It is re-read from this table on every request; tokens never carry it.
"""
from sqlalchemy import Column, String, Boolean, Integer, Text
import enum
from ..database import Base, UTCDateTime, generate_id, utc_now
from ..core.enums import value_enum

class UserRole(str, enum.Enum):
    """
    Enumeration for account roles.
    
    Roles:
    - PATIENT: Submits organ requests
    - DONOR: Pledges organs
    - DOCTOR: Reviews requests and records matches
    - ADMIN: Manages accounts and reads statistics
    """
    PATIENT = "patient"
    DONOR = "donor"
    DOCTOR = "doctor"
    ADMIN = "admin"

class BloodType(str, enum.Enum):
    """ABO/Rh blood groups recorded on an account profile."""
    A_POS = "A+"
    A_NEG = "A-"
    B_POS = "B+"
    B_NEG = "B-"
    AB_POS = "AB+"
    AB_NEG = "AB-"
    O_POS = "O+"
    O_NEG = "O-"

class User(Base):
    """
    Account Model - Stores all account information in the system
    
    Fields:
    - id: Opaque identifier (the identity provider's subject)
    - email: Unique email address (optional)
    - first_name / last_name: Display name
    - profile_image_url: Avatar URL from the identity provider
    - role: patient, donor, doctor or admin; None until chosen
    - phone_number, date_of_birth, blood_type, medical_condition,
      weight, height, address, city, state, zip_code,
      emergency_contact, emergency_phone: Free-form profile fields
    - is_active: Toggled by administrators; inactive accounts cannot use role-gated routes
    - created_at / updated_at: Creation and last update instants
    """
    __tablename__ = "users"

    id = Column(String(64), primary_key=True, default=generate_id)
    email = Column(String, unique=True, index=True, nullable=True)
    first_name = Column(String, nullable=True)
    last_name = Column(String, nullable=True)
    profile_image_url = Column(String, nullable=True)
    role = Column(value_enum(UserRole, "user_role"), nullable=True, index=True)
    phone_number = Column(Text, nullable=True)
    date_of_birth = Column(UTCDateTime(), nullable=True)
    blood_type = Column(value_enum(BloodType, "blood_type"), nullable=True)
    medical_condition = Column(Text, nullable=True)
    weight = Column(Integer, nullable=True)
    height = Column(Integer, nullable=True)
    address = Column(Text, nullable=True)
    city = Column(Text, nullable=True)
    state = Column(Text, nullable=True)
    zip_code = Column(Text, nullable=True)
    emergency_contact = Column(Text, nullable=True)
    emergency_phone = Column(Text, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(UTCDateTime(), default=utc_now)
    updated_at = Column(UTCDateTime(), default=utc_now)

    def __repr__(self):
        """String representation of the User model"""
        return f"<User(id={self.id}, email='{self.email}', role={self.role})>"

    @property
    def full_name(self) -> str:
        """Display name assembled from first and last name"""
        return " ".join(part for part in (self.first_name, self.last_name) if part)
