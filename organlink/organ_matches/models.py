"""
Organ Match Model - Links one organ request with one organ pledge.

The compatibility score is supplied by the doctor recording the match; it is
stored as given and only used for ordering.
"""
from sqlalchemy import Column, String, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship
from ..database import Base, UTCDateTime, generate_id, utc_now
from ..core.enums import RequestStatus, value_enum

class OrganMatch(Base):
    """
    Organ Match Model
    
    Fields:
    - id: Opaque identifier
    - request_id: Matched organ request
    - pledge_id: Matched organ pledge
    - compatibility_score: 0-100, externally supplied
    - doctor_id: Doctor or admin who recorded the match
    - status: Review status (starts at pending)
    - recommended_by: Account recommending the match
    - approved_by: Admin who last changed the status
    - notes: Free-text notes
    - created_at / updated_at: Creation and last update instants
    """
    __tablename__ = "organ_matches"

    id = Column(String(64), primary_key=True, default=generate_id)
    request_id = Column(String(64), ForeignKey("organ_requests.id"), nullable=False)
    pledge_id = Column(String(64), ForeignKey("organ_pledges.id"), nullable=False)
    compatibility_score = Column(Integer, nullable=True)
    doctor_id = Column(String(64), ForeignKey("users.id"), nullable=True)
    status = Column(value_enum(RequestStatus, "request_status"), default=RequestStatus.PENDING, index=True)
    recommended_by = Column(String(64), ForeignKey("users.id"), nullable=True)
    approved_by = Column(String(64), ForeignKey("users.id"), nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(UTCDateTime(), default=utc_now)
    updated_at = Column(UTCDateTime(), default=utc_now)

    # Relationships
    request = relationship("OrganRequest", back_populates="matches")
    pledge = relationship("OrganPledge", back_populates="matches")

    def __repr__(self):
        """String representation of the OrganMatch model"""
        return f"<OrganMatch(id={self.id}, request_id={self.request_id}, pledge_id={self.pledge_id}, score={self.compatibility_score})>"

    def update_status(self, status: RequestStatus, approver_id: str) -> None:
        """
        Overwrite the match status and record the approving admin
        
        Args:
            status: New status
            approver_id: Admin making the change
        """
        self.status = status
        self.approved_by = approver_id
        self.updated_at = utc_now()
