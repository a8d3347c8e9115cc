"""
Review flow for request and match statuses.

The API writes any status an authorized caller asks for. This table records
the flow reviewers are expected to follow so that out-of-flow writes can be
reported; it is not enforced.
"""
from typing import Dict, FrozenSet, Optional

from .enums import RequestStatus

INTENDED_TRANSITIONS: Dict[RequestStatus, FrozenSet[RequestStatus]] = {
    RequestStatus.PENDING: frozenset({RequestStatus.APPROVED, RequestStatus.REJECTED}),
    RequestStatus.APPROVED: frozenset({RequestStatus.MATCHED}),
    RequestStatus.REJECTED: frozenset(),
    RequestStatus.MATCHED: frozenset({RequestStatus.COMPLETED}),
    RequestStatus.COMPLETED: frozenset(),
}

INITIAL_STATUS = RequestStatus.PENDING


def is_intended_transition(current: Optional[RequestStatus], new: RequestStatus) -> bool:
    """
    Check whether moving from ``current`` to ``new`` follows the review flow.

    Re-writing the same status counts as in-flow. A record with no stored
    status is treated as pending.

    Args:
        current: Stored status (may be None for legacy rows)
        new: Requested status

    Returns:
        bool: True if the move is part of the intended flow
    """
    current = current or INITIAL_STATUS
    if current == new:
        return True
    return new in INTENDED_TRANSITIONS.get(current, frozenset())
