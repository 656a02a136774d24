from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Response
from fastapi.responses import JSONResponse

from ..config import get_logger
from ..errors import ApiError, InvalidRequestError, NotFoundError
from ..graph import run_trip_graph, FALLBACK_DESTINATION_NAME
from ..memory.store import MemStorage
from ..models.schemas import (
    Trip, TripCreate, TripUpdate, TripDetail, TripDetailCreate,
    BudgetAllocation, BudgetAllocationUpdate, changes,
)
from ..tools.calendar import make_ics, ics_filename
from .deps import get_store, get_trip_graph

log = get_logger(__name__)

router = APIRouter(prefix="/api/trips")


def _require_trip(store: MemStorage, trip_id: int) -> Trip:
    trip = store.get_trip(trip_id)
    if trip is None:
        raise NotFoundError("Trip not found")
    return trip


@router.get("", response_model=List[Trip])
async def list_trips(user_id: Optional[int] = Query(None, alias="userId"), store: MemStorage = Depends(get_store)):
    return store.get_trips(user_id)

@router.get("/{trip_id}", response_model=Trip)
async def get_trip(trip_id: int, store: MemStorage = Depends(get_store)):
    return _require_trip(store, trip_id)

@router.post("", response_model=Trip, status_code=201)
async def create_trip(req: TripCreate, trip_graph=Depends(get_trip_graph)):
    log.info("Received trip data: %s", req.model_dump(exclude_unset=True))
    try:
        state = run_trip_graph(trip_graph, req)
    except ApiError:
        raise
    except Exception as e:
        log.exception("Error creating trip")
        return JSONResponse(status_code=500, content={"message": "Failed to create trip", "error": str(e)})
    return state.trip

@router.put("/{trip_id}", response_model=Trip)
async def update_trip(trip_id: int, update: TripUpdate, store: MemStorage = Depends(get_store)):
    trip = store.update_trip(trip_id, changes(update))
    if trip is None:
        raise NotFoundError("Trip not found")
    return trip

@router.delete("/{trip_id}", status_code=204)
async def delete_trip(trip_id: int, store: MemStorage = Depends(get_store)):
    if not store.delete_trip(trip_id):
        raise NotFoundError("Trip not found")
    return Response(status_code=204)


# ---------- day plans ----------

@router.get("/{trip_id}/details", response_model=List[TripDetail])
async def list_trip_details(trip_id: int, store: MemStorage = Depends(get_store)):
    return store.get_trip_details(trip_id)

@router.post("/{trip_id}/details", response_model=TripDetail, status_code=201)
async def create_trip_detail(trip_id: int, detail: TripDetailCreate, store: MemStorage = Depends(get_store)):
    return store.create_trip_detail({**detail.model_dump(), "trip_id": trip_id})


# ---------- budget ----------

@router.get("/{trip_id}/budget", response_model=BudgetAllocation)
async def get_budget(trip_id: int, store: MemStorage = Depends(get_store)):
    allocation = store.get_budget_allocation(trip_id)
    if allocation is None:
        raise NotFoundError("Budget allocation not found")
    return allocation

@router.put("/{trip_id}/budget", response_model=BudgetAllocation)
async def update_budget(trip_id: int, update: BudgetAllocationUpdate, store: MemStorage = Depends(get_store)):
    allocation = store.update_budget_allocation(trip_id, changes(update))
    if allocation is None:
        raise NotFoundError("Budget allocation not found")
    return allocation


# ---------- calendar export ----------

@router.get("/{trip_id}/calendar")
async def export_calendar(trip_id: int, store: MemStorage = Depends(get_store)):
    trip = _require_trip(store, trip_id)
    dest = store.get_destination(trip.destination_id)
    name = dest.name if dest else FALLBACK_DESTINATION_NAME
    try:
        body = make_ics(trip, name, store.get_trip_details(trip_id))
    except ValueError:
        raise InvalidRequestError("Trip start date is not an ISO date", field="startDate")
    return Response(
        content=body,
        media_type="text/calendar",
        headers={"Content-Disposition": f'attachment; filename="{ics_filename(name, trip.start_date)}"'},
    )
