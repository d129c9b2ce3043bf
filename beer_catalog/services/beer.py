"""Beer service — catalog CRUD, list filtering and patch merging.

Id-keyed operations return ``BeerOut | NotFound``; nothing here raises for a
missing beer. Storage errors propagate unchanged.

Rule: No FastAPI here. The repository is injected so callers own the session.
"""


import logging

from beer_catalog.core.result import NotFound, Outcome
from beer_catalog.domain.beer import Beer
from beer_catalog.repositories.beer import BeerRepository
from beer_catalog.schemas.beer import BeerCreate, BeerOut, BeerPatch, BeerUpdate
from beer_catalog.services.filters import BeerFilter

logger = logging.getLogger(__name__)

_ENTITY = "Beer"

def to_out(beer: Beer) -> BeerOut:
    return BeerOut.model_validate(beer)

class BeerService:
    def __init__(self, repo: BeerRepository):
        self._repo = repo

    async def create_beer(self, data: BeerCreate) -> BeerOut:
        beer = await self._repo.create(**data.model_dump())
        logger.info("Created beer %s (version %s)", beer.id, beer.version)
        return to_out(beer)

    async def get_beer(self, beer_id: str) -> Outcome[BeerOut]:
        beer = await self._repo.get_by_id(beer_id)
        if beer is None:
            return self._missing(beer_id)
        return to_out(beer)

    async def list_beers(self, beer_filter: BeerFilter) -> list[BeerOut]:
        query = beer_filter.build()
        logger.debug("Listing beers, query shape=%s", query.shape.value)
        beers = await self._repo.find(*query.criteria)
        return beer_filter.apply_visibility(to_out(b) for b in beers)

    async def update_beer(self, beer_id: str, data: BeerUpdate) -> Outcome[BeerOut]:
        beer = await self._repo.get_by_id(beer_id)
        if beer is None:
            return self._missing(beer_id)
        beer = await self._repo.update(beer, **data.model_dump())
        logger.info("Updated beer %s (version %s)", beer.id, beer.version)
        return to_out(beer)

    async def patch_beer(self, beer_id: str, data: BeerPatch) -> Outcome[BeerOut]:
        beer = await self._repo.get_by_id(beer_id)
        if beer is None:
            return self._missing(beer_id)
        changes = data.changes()
        beer = await self._repo.update(beer, **changes)
        logger.info(
            "Patched beer %s fields=%s (version %s)",
            beer.id, sorted(changes), beer.version,
        )
        return to_out(beer)

    async def delete_beer(self, beer_id: str) -> Outcome[BeerOut]:
        beer = await self._repo.get_by_id(beer_id)
        if beer is None:
            return self._missing(beer_id)
        snapshot = to_out(beer)
        await self._repo.delete(beer)
        logger.info("Deleted beer %s", beer_id)
        return snapshot

    @staticmethod
    def _missing(beer_id: str) -> NotFound:
        logger.info("Beer %s not found", beer_id)
        return NotFound(_ENTITY, beer_id)
