from typing import Optional, List
from pydantic import BaseModel, Field


class GenerateRequest(BaseModel):
    idea: Optional[str] = None


class Brand(BaseModel):
    name: str = Field(max_length=30)
    logo: str  # placeholder image URL


class Product(BaseModel):
    title: str
    description: str
    price: str


class GenerateResponse(BaseModel):
    brand: Brand
    product: Product
    ads: List[str] = Field(min_length=3, max_length=3)


class ErrorResponse(BaseModel):
    error: str
