"""Data Transfer Objects (DTOs) for API requests and responses"""

from .acknowledgment import DeleteAck, InsertAck, MessageResponse, UpdateAck
from .auth import TokenResponse
from .status import StatusUpdateRequest
from .user import AdminCheckResponse, UserCreateRequest

__all__ = [
    # Acknowledgments
    "InsertAck",
    "UpdateAck",
    "DeleteAck",
    "MessageResponse",
    # Auth
    "TokenResponse",
    # Users
    "UserCreateRequest",
    "AdminCheckResponse",
    "StatusUpdateRequest",
]
