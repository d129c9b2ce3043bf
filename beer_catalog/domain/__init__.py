"""Domain package — all ORM models are imported here so metadata.create_all sees them.

Folder intent:
  beer.py    — Beer entity and the BeerStyle enumeration
  mixins.py  — Shared TimestampMixin
"""

from beer_catalog.domain.beer import Beer, BeerStyle

__all__ = [
    "Beer",
    "BeerStyle",
]
