"""Abstract interface (port) for uploading connector media files."""

from abc import ABC, abstractmethod
from collections.abc import Mapping

from connector_admin.domain.entities import Attachment


class AttachmentUploader(ABC):
    """Port for uploading attachments before a record is saved."""

    @abstractmethod
    async def upload_attachments(
        self, base_filename: str, attachments: Mapping[str, Attachment]
    ) -> dict[str, str]:
        """Upload attachments keyed by slot and return the stored path per slot."""
        ...
