"""
Medical Record Model - Stores evaluations, test results and check-ups.

Records are written by doctors or administrators about a target account.
"""
from sqlalchemy import Column, String, ForeignKey, Text, JSON
from sqlalchemy.orm import relationship
from ..database import Base, UTCDateTime, generate_id, utc_now

class MedicalRecord(Base):
    """
    Medical Record Model
    
    Fields:
    - id: Opaque identifier
    - user_id: Account the record is about
    - record_type: e.g. evaluation, test_result, checkup
    - description: Record body
    - results: Optional results text
    - doctor_id: Doctor or admin who wrote the record
    - attachments: List of attachment references
    - created_at: When the record was created
    """
    __tablename__ = "medical_records"

    id = Column(String(64), primary_key=True, default=generate_id)
    user_id = Column(String(64), ForeignKey("users.id"), nullable=False, index=True)
    record_type = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    results = Column(Text, nullable=True)
    doctor_id = Column(String(64), ForeignKey("users.id"), nullable=True)
    attachments = Column(JSON, nullable=True)
    created_at = Column(UTCDateTime(), default=utc_now, index=True)

    # Relationships
    user = relationship("User", foreign_keys=[user_id])
    doctor = relationship("User", foreign_keys=[doctor_id])

    def __repr__(self):
        """String representation of the MedicalRecord model"""
        return f"<MedicalRecord(id={self.id}, user_id={self.user_id}, doctor_id={self.doctor_id})>"
