"""Product domain entity."""

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """A catalog product offered for quotation. Identity is ``internal_code``."""

    model_config = ConfigDict(frozen=True)

    internal_code: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    barcode: str = Field(..., min_length=1)
