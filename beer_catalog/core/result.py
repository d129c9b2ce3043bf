"""Typed outcomes for id-keyed operations.

Service methods that look a record up by id return either the record or a
:class:`NotFound` value instead of raising, so the transport layer decides
how a miss is surfaced.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class NotFound:
    entity: str
    entity_id: str


Outcome = Union[T, NotFound]
