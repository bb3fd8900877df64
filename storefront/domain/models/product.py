"""
Product Model
=============

Domain model representing a catalogue product.
"""
from pydantic import BaseModel, Field


class Product(BaseModel):
    """Domain model representing a product."""
    id: int = Field(..., gt=0, description="Unique identifier for the product")
    name: str = Field(..., description="Product name")
