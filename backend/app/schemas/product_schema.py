# backend/app/schemas/product_schema.py
from typing import Any, Dict, Optional, Union
from pydantic import BaseModel
from pydantic import ConfigDict

EXAMPLE_PRODUCT = {
    "name": "product1",
    "price": 1000,
    "discount": 800,
    "review_count": 99,
    "image_url": "https://example.com/image.jpg",
}

class ProductIn(BaseModel):
    """
    Request body for create and update. Every field may be omitted.

    Values are passed to the store untouched; the column types decide
    what is accepted.
    """
    model_config = ConfigDict(json_schema_extra={"example": EXAMPLE_PRODUCT})
    name: Any = None
    price: Any = None
    discount: Any = None
    review_count: Any = None
    image_url: Any = None

class ProductOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: Optional[str] = None
    price: Optional[float] = None
    discount: Optional[float] = None
    # loosely typed stores keep non-integral values as written
    review_count: Optional[Union[int, float]] = None
    image_url: Optional[str] = None

class MessageOut(BaseModel):
    message: str

class ErrorOut(BaseModel):
    message: str
    error: Dict[str, Any]
