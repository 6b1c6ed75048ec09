from .user import BASELINE_ROLE, User, UserRole
from .connector import ATTACHMENT_SLOTS, Attachment, AttachmentSlot, Connector

__all__ = [
    "BASELINE_ROLE",
    "User",
    "UserRole",
    "ATTACHMENT_SLOTS",
    "Attachment",
    "AttachmentSlot",
    "Connector",
]
