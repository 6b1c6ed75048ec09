from .data_gateway import DataGateway
from .attachment_uploader import AttachmentUploader
from .document_store import Document, DocumentStore

__all__ = [
    "DataGateway",
    "AttachmentUploader",
    "Document",
    "DocumentStore",
]
