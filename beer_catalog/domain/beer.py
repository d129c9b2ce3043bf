"""SQLAlchemy ORM model for Beers.

  - UUID primary key, assigned on insert and never changed
  - version is SQLAlchemy's version_id_col: 1 on insert, +1 on every UPDATE
  - created_at / updated_at (from TimestampMixin)
"""

from __future__ import annotations

import enum
import uuid
from decimal import Decimal
from typing import Optional

from sqlalchemy import CheckConstraint, Enum, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from beer_catalog.db.base import Base
from beer_catalog.domain.mixins import TimestampMixin


class BeerStyle(str, enum.Enum):
    LAGER = "LAGER"
    PILSNER = "PILSNER"
    STOUT = "STOUT"
    GOSE = "GOSE"
    PORTER = "PORTER"
    ALE = "ALE"
    WHEAT = "WHEAT"
    IPA = "IPA"
    PALE_ALE = "PALE_ALE"
    SAISON = "SAISON"


class Beer(Base, TimestampMixin):
    __tablename__ = "beer"
    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_beer_price_non_negative"),
        CheckConstraint(
            "quantity_on_hand IS NULL OR quantity_on_hand >= 0",
            name="ck_beer_quantity_non_negative",
        ),
    )

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    beer_name: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    beer_style: Mapped[BeerStyle] = mapped_column(
        Enum(BeerStyle, name="beer_style", native_enum=False, length=20),
        nullable=False,
        index=True,
    )
    upc: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    quantity_on_hand: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    __mapper_args__ = {"version_id_col": version}

    def __repr__(self) -> str:
        return f"<Beer id={self.id} name={self.beer_name!r} v{self.version}>"
