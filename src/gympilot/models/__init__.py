"""Domain models package.

Gym lives in gympilot.models.gym and is not re-exported here, since it pulls
in the secretary and enrollment machinery.
"""

from gympilot.models.enums import (
    SESSION_POLICIES,
    ForumType,
    Gender,
    RejectionReason,
    SessionPolicy,
    SessionType,
)
from gympilot.models.person import Balance, Client, Instructor, Person
from gympilot.models.schemas import (
    ClientCreate,
    ClientRead,
    DateNotificationCreate,
    EnrollmentCreate,
    EnrollmentRead,
    InstructorCreate,
    InstructorRead,
    NotificationCreate,
    NotificationResult,
    PayrollResult,
    SecretaryCreate,
    SecretaryRead,
    SessionCreate,
    SessionRead,
)
from gympilot.models.session import Session

__all__ = [
    "SESSION_POLICIES",
    "Balance",
    "Client",
    "ClientCreate",
    "ClientRead",
    "DateNotificationCreate",
    "EnrollmentCreate",
    "EnrollmentRead",
    "ForumType",
    "Gender",
    "Instructor",
    "InstructorCreate",
    "InstructorRead",
    "NotificationCreate",
    "NotificationResult",
    "PayrollResult",
    "Person",
    "RejectionReason",
    "SecretaryCreate",
    "SecretaryRead",
    "Session",
    "SessionCreate",
    "SessionPolicy",
    "SessionRead",
    "SessionType",
]
