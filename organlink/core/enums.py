"""
Shared enumerations for organ requests, pledges and matches.

Values are the lower-case strings used on the wire and in the database.
"""
import enum

from sqlalchemy import Enum


class OrganType(str, enum.Enum):
    """Organs that can be requested or pledged."""
    HEART = "heart"
    KIDNEY = "kidney"
    LIVER = "liver"
    LUNG = "lung"
    PANCREAS = "pancreas"
    CORNEA = "cornea"


class PriorityLevel(str, enum.Enum):
    """Clinical urgency of an organ request."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class RequestStatus(str, enum.Enum):
    """Progress of a request or a match. Both share this enum."""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    MATCHED = "matched"
    COMPLETED = "completed"


class DonationType(str, enum.Enum):
    """How a pledged organ would be donated."""
    LIVING = "living"
    POSTHUMOUS = "posthumous"


def value_enum(enum_class, name: str) -> Enum:
    """
    Column type storing an enum by its value rather than its member name.

    Args:
        enum_class: Python enum class
        name: Database enum type name

    Returns:
        Enum: SQLAlchemy column type
    """
    return Enum(
        enum_class,
        name=name,
        values_callable=lambda members: [member.value for member in members],
    )
