"""Pydantic DTOs for the connector endpoints (backend wire shape)."""

from pydantic import BaseModel, Field


class ConnectorWrite(BaseModel):
    """Schema for creating or replacing a connector.

    On replace, ``yazaki_pn`` is ignored: the stored part number is kept.
    """

    yazaki_pn: str = Field(..., min_length=1, max_length=100, examples=["7283-1020"])
    customer_pn: str = Field(..., min_length=1, max_length=100)
    supplier_pn: str = Field(..., min_length=1, max_length=100)
    supplier_name: str = Field(..., min_length=1, max_length=200, examples=["Acme"])
    name: str | None = Field(None, max_length=200)
    price: float | None = Field(None, ge=0)
    drawing_2d_path: str | None = None
    model_3d_path: str | None = None
    image_path: str | None = None


class ConnectorResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    yazaki_pn: str
    customer_pn: str
    supplier_pn: str
    supplier_name: str
    name: str | None = None
    price: float | None = None
    drawing_2d_path: str | None = None
    model_3d_path: str | None = None
    image_path: str | None = None
