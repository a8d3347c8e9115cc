"""
Organ Request Model - Stores requests for an organ submitted by patients.

A request is owned by exactly one patient account and moves through the
shared review statuses as doctors and administrators act on it.
"""
from sqlalchemy import Column, String, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship
from ..database import Base, UTCDateTime, generate_id, utc_now
from ..core.enums import OrganType, PriorityLevel, RequestStatus, value_enum

class OrganRequest(Base):
    """
    Organ Request Model
    
    Fields:
    - id: Opaque identifier
    - patient_id: Owning patient account
    - organ_type: Requested organ
    - priority: Clinical urgency
    - status: Review status (starts at pending)
    - medical_reason: Patient-supplied justification
    - doctor_notes: Notes left by the reviewer
    - approved_by: Account that last changed the status
    - rejection_reason: Reason recorded on rejection
    - estimated_wait_time: Estimated wait in days
    - created_at / updated_at: Creation and last update instants
    """
    __tablename__ = "organ_requests"

    id = Column(String(64), primary_key=True, default=generate_id)
    patient_id = Column(String(64), ForeignKey("users.id"), nullable=False, index=True)
    organ_type = Column(value_enum(OrganType, "organ_type"), nullable=False)
    priority = Column(value_enum(PriorityLevel, "priority_level"), nullable=False)
    status = Column(value_enum(RequestStatus, "request_status"), default=RequestStatus.PENDING, index=True)
    medical_reason = Column(Text, nullable=False)
    doctor_notes = Column(Text, nullable=True)
    approved_by = Column(String(64), ForeignKey("users.id"), nullable=True)
    rejection_reason = Column(Text, nullable=True)
    estimated_wait_time = Column(Integer, nullable=True)
    created_at = Column(UTCDateTime(), default=utc_now, index=True)
    updated_at = Column(UTCDateTime(), default=utc_now)

    # Relationships
    patient = relationship("User", foreign_keys=[patient_id])
    matches = relationship("OrganMatch", back_populates="request")

    def __repr__(self):
        """String representation of the OrganRequest model"""
        return f"<OrganRequest(id={self.id}, patient_id={self.patient_id}, organ_type={self.organ_type}, status={self.status})>"

    def update_status(self, status: RequestStatus, reviewer_id: str, notes: str = None) -> None:
        """
        Overwrite the review status and record who made the change
        
        Args:
            status: New status
            reviewer_id: Doctor or admin making the change
            notes: Optional reviewer notes; empty notes leave existing ones untouched
        """
        self.status = status
        self.approved_by = reviewer_id
        if notes:
            self.doctor_notes = notes
        self.updated_at = utc_now()
