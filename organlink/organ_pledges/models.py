"""
Organ Pledge Model - Stores organs pledged by donors.
"""
from sqlalchemy import Column, String, Boolean, ForeignKey, Text
from sqlalchemy.orm import relationship
from ..database import Base, UTCDateTime, generate_id, utc_now
from ..core.enums import OrganType, DonationType, value_enum

class OrganPledge(Base):
    """
    Organ Pledge Model
    
    Fields:
    - id: Opaque identifier
    - donor_id: Owning donor account
    - organ_type: Pledged organ
    - donation_type: Living or posthumous donation
    - is_available: True until the pledge is consumed by a match
    - medical_notes: Donor-supplied notes
    - approved_by: Account that approved the pledge
    - created_at / updated_at: Creation and last update instants
    """
    __tablename__ = "organ_pledges"

    id = Column(String(64), primary_key=True, default=generate_id)
    donor_id = Column(String(64), ForeignKey("users.id"), nullable=False, index=True)
    organ_type = Column(value_enum(OrganType, "organ_type"), nullable=False)
    donation_type = Column(value_enum(DonationType, "donation_type"), nullable=False)
    is_available = Column(Boolean, default=True, index=True)
    medical_notes = Column(Text, nullable=True)
    approved_by = Column(String(64), ForeignKey("users.id"), nullable=True)
    created_at = Column(UTCDateTime(), default=utc_now, index=True)
    updated_at = Column(UTCDateTime(), default=utc_now)

    # Relationships
    donor = relationship("User", foreign_keys=[donor_id])
    matches = relationship("OrganMatch", back_populates="pledge")

    def __repr__(self):
        """String representation of the OrganPledge model"""
        return f"<OrganPledge(id={self.id}, donor_id={self.donor_id}, organ_type={self.organ_type}, available={self.is_available})>"
