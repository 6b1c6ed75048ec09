from .user import UserWrite, UserResponse
from .connector import ConnectorWrite, ConnectorResponse
from .data import AppDataResponse

__all__ = [
    "UserWrite",
    "UserResponse",
    "ConnectorWrite",
    "ConnectorResponse",
    "AppDataResponse",
]
