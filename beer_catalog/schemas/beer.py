"""Beer Pydantic schemas (request DTOs and response models).

Server-owned fields (id, version, createdAt, updatedAt) only exist on
:class:`BeerOut`; when a client sends them in a request body they are
dropped as unknown keys.
"""


from datetime import datetime
from decimal import Decimal

from pydantic import Field, model_validator

from beer_catalog.domain.beer import BeerStyle
from beer_catalog.schemas.common import CamelModel

_REQUIRED_ON_PATCH = ("beer_name", "beer_style", "upc", "price")

class BeerCreate(CamelModel):
    beer_name: str = Field(min_length=1, max_length=50)
    beer_style: BeerStyle
    upc: str = Field(min_length=1, max_length=255)
    price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)
    quantity_on_hand: int | None = Field(default=None, ge=0)

class BeerUpdate(BeerCreate):
    """Full replacement body for PUT; same shape as BeerCreate."""

class BeerPatch(CamelModel):
    """Partial update body. Only fields present in the request are applied."""

    beer_name: str | None = Field(default=None, min_length=1, max_length=50)
    beer_style: BeerStyle | None = None
    upc: str | None = Field(default=None, min_length=1, max_length=255)
    price: Decimal | None = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    quantity_on_hand: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _reject_null_required_fields(self) -> "BeerPatch":
        nulled = [
            name for name in _REQUIRED_ON_PATCH
            if name in self.model_fields_set and getattr(self, name) is None
        ]
        if nulled:
            raise ValueError(f"fields cannot be null: {', '.join(nulled)}")
        return self

    def changes(self) -> dict:
        """Fields the caller actually sent, by attribute name."""
        return self.model_dump(exclude_unset=True)

class BeerOut(CamelModel):
    id: str
    version: int
    beer_name: str
    beer_style: BeerStyle
    upc: str
    price: Decimal
    quantity_on_hand: int | None = None
    created_at: datetime
    updated_at: datetime
