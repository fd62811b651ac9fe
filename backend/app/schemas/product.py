from typing import Optional
from pydantic import BaseModel, ConfigDict


class ProductFields(BaseModel):
    """
    Body of POST /products and PUT /products/{id}.

    Fields are optional at the parsing stage so a partial body can be
    answered with a 400 instead of a schema error. Zero is a valid
    price or quantity; an empty string is not a valid name.
    """
    name: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    price: Optional[float] = None
    quantity: Optional[int] = None

    def is_complete(self) -> bool:
        return (
            bool(self.name)
            and bool(self.description)
            and bool(self.category)
            and self.price is not None
            and self.quantity is not None
        )


class ProductResponse(BaseModel):
    id: int
    name: str
    description: str
    category: str
    price: float
    quantity: int

    model_config = ConfigDict(from_attributes=True)


class ProductUpdated(ProductResponse):
    message: str
