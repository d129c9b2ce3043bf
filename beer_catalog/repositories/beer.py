"""Beer repository."""


from beer_catalog.domain.beer import Beer
from beer_catalog.repositories.base import BaseRepository


class BeerRepository(BaseRepository[Beer]):
    model = Beer
