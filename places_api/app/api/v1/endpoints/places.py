"""
Place endpoints for API v1.

Five routes map one-to-one onto ``PlaceService`` methods.  Handlers are
plain ``def`` functions, so FastAPI runs each request in its worker
threadpool while the blocking SQLite call completes.

Status codes:

* client errors (bad id, bad JSON, failed validation) are ``400``;
* an unknown id on ``GET`` is also ``400`` with ``ID not found``;
* store failures are ``500`` with the underlying error text.

Update and delete do not check that the id exists; both answer ``204``
for unknown ids.
"""

import logging
import re
import sqlite3
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from places_api.app.schemas.place import PlaceIn, PlaceRead
from places_api.app.services.place_service import (
    PlaceNotFoundError,
    PlaceService,
    PlaceStoreError,
)

logger = logging.getLogger(__name__)

router = APIRouter()

ID_NOT_FOUND = "ID not found"
PLACE_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
PLACE_ID_MIN = -(2**63)
PLACE_ID_MAX = 2**63 - 1


def get_place_service(request: Request) -> PlaceService:
    """Return the service built once at startup by ``create_app``."""
    return request.app.state.place_service


def parse_place_id(place_id: str) -> int:
    """Parse the ``{place_id}`` path segment, answering 400 when it is not an integer.

    Only ASCII digits with an optional sign are accepted, and the value
    must fit SQLite's signed 64-bit INTEGER.
    """
    if not PLACE_ID_PATTERN.fullmatch(place_id):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=ID_NOT_FOUND)
    value = int(place_id)
    if not PLACE_ID_MIN <= value <= PLACE_ID_MAX:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=ID_NOT_FOUND)
    return value


def _store_failure(exc: Exception) -> HTTPException:
    logger.exception("Place store operation failed")
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))


@router.get("", response_model=List[PlaceRead])
def list_places(
    name: str = Query("", description="Case-insensitive substring of the place name"),
    service: PlaceService = Depends(get_place_service),
) -> List[PlaceRead]:
    """List places, optionally filtered by name.

    Returns an empty list rather than ``null`` when nothing matches.
    There is no pagination.
    """
    try:
        return service.list_places(name)
    except sqlite3.Error as exc:
        raise _store_failure(exc)


@router.api_route("/", methods=["GET", "PUT", "DELETE"], include_in_schema=False)
def missing_place_id() -> None:
    """An empty id segment is a bad id, not the collection."""
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=ID_NOT_FOUND)


@router.get("/{place_id}", response_model=PlaceRead)
def get_place(
    place_id: int = Depends(parse_place_id),
    service: PlaceService = Depends(get_place_service),
) -> PlaceRead:
    """Retrieve a single place.  Unknown ids answer 400, not 404."""
    try:
        return service.get_place(place_id)
    except PlaceNotFoundError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=ID_NOT_FOUND)
    except sqlite3.Error as exc:
        raise _store_failure(exc)


@router.post("", response_model=PlaceRead, status_code=status.HTTP_201_CREATED)
def create_place(
    place_in: PlaceIn,
    service: PlaceService = Depends(get_place_service),
) -> PlaceRead:
    """Create a place; the response includes the store-assigned id."""
    try:
        return service.create_place(place_in)
    except PlaceStoreError as exc:
        raise _store_failure(exc)


@router.put("/{place_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_place(
    place_in: PlaceIn,
    place_id: int = Depends(parse_place_id),
    service: PlaceService = Depends(get_place_service),
) -> None:
    """Replace every field of a place.  Omitted fields are cleared."""
    try:
        service.update_place(place_id, place_in)
    except sqlite3.Error as exc:
        raise _store_failure(exc)
    return None


@router.delete("/{place_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_place(
    place_id: int = Depends(parse_place_id),
    service: PlaceService = Depends(get_place_service),
) -> None:
    """Delete a place.  Deleting an unknown id is not an error."""
    try:
        service.delete_place(place_id)
    except sqlite3.Error as exc:
        raise _store_failure(exc)
    return None
