"""Beer CRUD router.

Pattern:
  1. Inject DB session via Depends
  2. Instantiate the service with a repository bound to that session
  3. Call the service; a NotFound outcome becomes a 404 via NotFoundError
  4. Wrap the record in the response envelope
"""

from __future__ import annotations

from typing import Optional, TypeVar

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from beer_catalog.core.exceptions import NotFoundError
from beer_catalog.core.response import DataResponse, ListResponse
from beer_catalog.core.result import NotFound, Outcome
from beer_catalog.db.base import get_db
from beer_catalog.domain.beer import BeerStyle
from beer_catalog.repositories.beer import BeerRepository
from beer_catalog.schemas.beer import BeerCreate, BeerOut, BeerPatch, BeerUpdate
from beer_catalog.services.beer import BeerService
from beer_catalog.services.filters import BeerFilter

router = APIRouter(prefix="/beers", tags=["Beers"])

T = TypeVar("T")


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------

def _svc(session: AsyncSession) -> BeerService:
    return BeerService(BeerRepository(session))


def _unwrap(outcome: Outcome[T]) -> T:
    if isinstance(outcome, NotFound):
        raise NotFoundError.from_outcome(outcome)
    return outcome


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------

@router.get("", response_model=ListResponse[BeerOut])
async def list_beers(
    beer_name: Optional[str] = Query(default=None, alias="beerName", description="Name contains (case-insensitive)"),
    beer_style: Optional[BeerStyle] = Query(default=None, alias="beerStyle", description="Exact style"),
    show_inventory: Optional[bool] = Query(default=None, alias="showInventory", description="Include quantityOnHand"),
    session: AsyncSession = Depends(get_db),
):
    """List beers. quantityOnHand is null unless ?showInventory=true."""
    beer_filter = BeerFilter(
        name_contains=beer_name, style=beer_style, show_inventory=show_inventory,
    )
    return {"data": await _svc(session).list_beers(beer_filter)}


@router.post("", response_model=DataResponse[BeerOut], status_code=status.HTTP_201_CREATED)
async def create_beer(
    body: BeerCreate,
    session: AsyncSession = Depends(get_db),
):
    """Create a new beer."""
    return {"data": await _svc(session).create_beer(body)}


@router.get("/{beer_id}", response_model=DataResponse[BeerOut])
async def get_beer(
    beer_id: str,
    session: AsyncSession = Depends(get_db),
):
    return {"data": _unwrap(await _svc(session).get_beer(beer_id))}


@router.put("/{beer_id}", response_model=DataResponse[BeerOut])
async def update_beer(
    beer_id: str,
    body: BeerUpdate,
    session: AsyncSession = Depends(get_db),
):
    """Replace every mutable field of a beer."""
    return {"data": _unwrap(await _svc(session).update_beer(beer_id, body))}


@router.patch("/{beer_id}", response_model=DataResponse[BeerOut])
async def patch_beer(
    beer_id: str,
    body: BeerPatch,
    session: AsyncSession = Depends(get_db),
):
    """Update only the fields present in the body."""
    return {"data": _unwrap(await _svc(session).patch_beer(beer_id, body))}


@router.delete("/{beer_id}", response_model=DataResponse[BeerOut])
async def delete_beer(
    beer_id: str,
    session: AsyncSession = Depends(get_db),
):
    """Delete a beer and return it as it was before deletion."""
    return {"data": _unwrap(await _svc(session).delete_beer(beer_id))}
