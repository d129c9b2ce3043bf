"""Sample catalog loaded into an empty beer table (SEED_SAMPLE_DATA=true)."""

from __future__ import annotations

import logging
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from beer_catalog.domain.beer import Beer, BeerStyle

logger = logging.getLogger(__name__)

SAMPLE_BEERS: list[dict] = [
    {"beer_name": "Galaxy Cat", "beer_style": BeerStyle.PALE_ALE, "upc": "12356",
     "price": Decimal("12.99"), "quantity_on_hand": 122},
    {"beer_name": "Crank", "beer_style": BeerStyle.PALE_ALE, "upc": "12356222",
     "price": Decimal("11.99"), "quantity_on_hand": 392},
    {"beer_name": "Sunshine City", "beer_style": BeerStyle.IPA, "upc": "12356",
     "price": Decimal("13.99"), "quantity_on_hand": 144},
    {"beer_name": "Ninja Porter", "beer_style": BeerStyle.PORTER, "upc": "0631234300019",
     "price": Decimal("12.00"), "quantity_on_hand": 140},
    {"beer_name": "Hop Slam IPA", "beer_style": BeerStyle.IPA, "upc": "0083783375213",
     "price": Decimal("10.50"), "quantity_on_hand": 57},
    {"beer_name": "Salty Sea Gose", "beer_style": BeerStyle.GOSE, "upc": "0083783375220",
     "price": Decimal("9.25"), "quantity_on_hand": 0},
]


async def seed_sample_beers(session: AsyncSession) -> int:
    """Insert SAMPLE_BEERS when the table is empty; return the number inserted."""
    existing = (await session.execute(select(func.count()).select_from(Beer))).scalar_one()
    if existing:
        logger.info("Beer table already has %d rows, skipping seed", existing)
        return 0

    session.add_all(Beer(**row) for row in SAMPLE_BEERS)
    await session.flush()
    logger.info("Seeded %d sample beers", len(SAMPLE_BEERS))
    return len(SAMPLE_BEERS)
