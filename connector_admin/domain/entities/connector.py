"""Domain entity for connector part records and their media attachments."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Connector:
    """A connector part record.

    ``yazaki_pn`` is the natural key: shown to users, fixed after creation.
    Mutations are addressed by the backend surrogate ``id`` instead.
    """

    yazaki_pn: str
    customer_pn: str
    supplier_pn: str
    supplier_name: str
    name: str | None = None
    price: float | None = None
    drawing_2d_path: str | None = None
    model_3d_path: str | None = None
    image_path: str | None = None
    id: int | None = None

    def __post_init__(self) -> None:
        if self.price is not None and self.price < 0:
            raise ValueError(f"price must be non-negative, got {self.price}")


@dataclass(frozen=True)
class Attachment:
    """A binary file picked in the connector form, not yet uploaded."""

    filename: str
    content: bytes
    content_type: str = "application/octet-stream"


@dataclass(frozen=True)
class AttachmentSlot:
    """Where an attachment goes in the upload request and on the record."""

    key: str
    file_number: int
    subdir: str
    attribute: str


ATTACHMENT_SLOTS: tuple[AttachmentSlot, ...] = (
    AttachmentSlot("image", 1, "images", "image_path"),
    AttachmentSlot("drawing_2d", 2, "2d_drawing_files", "drawing_2d_path"),
    AttachmentSlot("model_3d", 3, "3d_drawing_files", "model_3d_path"),
)
