"""Data gateway infrastructure package."""

from .http_data_gateway import HttpDataGateway
from .local_file_gateway import LocalFileGateway

__all__ = ["HttpDataGateway", "LocalFileGateway"]
