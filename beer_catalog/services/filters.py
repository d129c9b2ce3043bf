"""Beer list filtering: query predicate composition and inventory redaction.

``BeerFilter`` holds the optional list parameters. ``build()`` turns them into
a :class:`BeerQuery`, which names the query shape and carries the SQLAlchemy
criteria for it:

    name  style   shape
    ----  -----   -----------------
    no    no      ALL
    yes   no      BY_NAME
    no    yes     BY_STYLE
    yes   yes     BY_NAME_AND_STYLE

Name matching is a case-insensitive substring match with LIKE wildcards in the
input escaped; style is an exact match.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass

from sqlalchemy import ColumnElement

from beer_catalog.domain.beer import Beer, BeerStyle
from beer_catalog.schemas.beer import BeerOut


class QueryShape(str, enum.Enum):
    ALL = "all"
    BY_NAME = "by_name"
    BY_STYLE = "by_style"
    BY_NAME_AND_STYLE = "by_name_and_style"


@dataclass(frozen=True, slots=True)
class BeerQuery:
    shape: QueryShape
    criteria: tuple[ColumnElement[bool], ...] = ()


@dataclass(frozen=True, slots=True)
class BeerFilter:
    name_contains: str | None = None
    style: BeerStyle | None = None
    show_inventory: bool | None = None

    @property
    def has_name(self) -> bool:
        # "" counts as no name filter
        return bool(self.name_contains)

    @property
    def has_style(self) -> bool:
        return self.style is not None

    @property
    def inventory_visible(self) -> bool:
        return self.show_inventory is True

    def build(self) -> BeerQuery:
        if self.has_name and self.has_style:
            return BeerQuery(
                QueryShape.BY_NAME_AND_STYLE,
                (self._name_criterion(), self._style_criterion()),
            )
        if self.has_name:
            return BeerQuery(QueryShape.BY_NAME, (self._name_criterion(),))
        if self.has_style:
            return BeerQuery(QueryShape.BY_STYLE, (self._style_criterion(),))
        return BeerQuery(QueryShape.ALL)

    def apply_visibility(self, records: Iterable[BeerOut]) -> list[BeerOut]:
        """Clear quantity_on_hand on every record unless inventory was requested."""
        if self.inventory_visible:
            return list(records)
        return [r.model_copy(update={"quantity_on_hand": None}) for r in records]

    def _name_criterion(self) -> ColumnElement[bool]:
        return Beer.beer_name.icontains(self.name_contains, autoescape=True)

    def _style_criterion(self) -> ColumnElement[bool]:
        return Beer.beer_style == self.style
