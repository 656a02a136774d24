import math
from typing import List, Dict, Any, Optional
from langgraph.graph import StateGraph, START, END
from pydantic import BaseModel, Field

from .config import get_logger
from .errors import MissingFieldError
from .memory.store import MemStorage
from .models.schemas import TripCreate, Trip, BudgetAllocation, DayPlan, TripDetail
from .tools.budget import allocate
from .tools.dates import parse_when
from .tools.itinerary import synthesize

log = get_logger(__name__)

FALLBACK_DESTINATION_NAME = "Your Destination"

# Checked in order; the first missing one is reported.
REQUIRED_FIELDS = [
    ("destination_id", "destinationId", "Destination ID is required"),
    ("start_date", "startDate", "Start date is required"),
    ("budget", "budget", "Budget is required"),
]

class TripState(BaseModel):
    request: TripCreate
    trip_data: Dict[str, Any] = Field(default_factory=dict)
    trip: Optional[Trip] = None
    allocation: Optional[BudgetAllocation] = None
    destination_name: Optional[str] = None
    day_plans: List[DayPlan] = Field(default_factory=list)
    details: List[TripDetail] = Field(default_factory=list)

def trip_duration(req: TripCreate) -> int:
    # Supplied duration, else whole days between the dates rounded up, else 1.
    if req.duration:
        days = req.duration
    elif req.end_date:
        delta = parse_when(req.end_date) - parse_when(req.start_date)
        days = math.ceil(delta.total_seconds() / 86400)
    else:
        days = 1
    return max(days, 1)

def build_trip_graph(store: MemStorage, rng=None):
    """Compile the trip-creation pipeline against ``store``.

    A failure after ``persist_trip`` leaves the trip stored without its
    allocation or with only some of its details.
    """

    def validate_request(state: TripState) -> Dict[str, Any]:
        req = state.request
        for attr, field, message in REQUIRED_FIELDS:
            if not getattr(req, attr):
                raise MissingFieldError(field, message)
        return {}

    def normalize_request(state: TripState) -> Dict[str, Any]:
        req = state.request
        data = req.model_dump()
        data.update(
            travelers=req.travelers or 1,
            duration=trip_duration(req),
            preferences=list(req.preferences),
            tour_guide_requested=req.tour_guide_requested is True,
        )
        log.info("Processed trip data: %s", data)
        return {"trip_data": data}

    def persist_trip(state: TripState) -> Dict[str, Any]:
        return {"trip": store.create_trip(state.trip_data)}

    def allocate_budget(state: TripState) -> Dict[str, Any]:
        trip = state.trip
        allocation = store.create_budget_allocation({"trip_id": trip.id, **allocate(trip.budget)})
        return {"allocation": allocation}

    def resolve_destination(state: TripState) -> Dict[str, Any]:
        dest = store.get_destination(state.trip.destination_id)
        return {"destination_name": dest.name if dest else FALLBACK_DESTINATION_NAME}

    def synthesize_itinerary(state: TripState) -> Dict[str, Any]:
        trip = state.trip
        plans = synthesize(state.destination_name, trip.duration, trip.budget, trip.preferences, rng=rng)
        return {"day_plans": plans}

    def persist_details(state: TripState) -> Dict[str, Any]:
        details = [
            store.create_trip_detail({"trip_id": state.trip.id, **plan.model_dump()})
            for plan in state.day_plans
        ]
        log.info("Trip %s created with %d day plans", state.trip.id, len(details))
        return {"details": details}

    graph = StateGraph(TripState)
    graph.add_node("validate", validate_request)
    graph.add_node("normalize", normalize_request)
    graph.add_node("persist_trip", persist_trip)
    graph.add_node("allocate_budget", allocate_budget)
    graph.add_node("resolve_destination", resolve_destination)
    graph.add_node("synthesize", synthesize_itinerary)
    graph.add_node("persist_details", persist_details)

    graph.add_edge(START, "validate")
    graph.add_edge("validate", "normalize")
    graph.add_edge("normalize", "persist_trip")
    graph.add_edge("persist_trip", "allocate_budget")
    graph.add_edge("allocate_budget", "resolve_destination")
    graph.add_edge("resolve_destination", "synthesize")
    graph.add_edge("synthesize", "persist_details")
    graph.add_edge("persist_details", END)

    return graph.compile()

def run_trip_graph(trip_graph, request: TripCreate) -> TripState:
    result = trip_graph.invoke({"request": request})
    # normalize to TripState no matter what invoke returns
    if isinstance(result, TripState):
        return result
    return TripState(**result)
