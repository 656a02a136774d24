import itertools
from collections import defaultdict
from datetime import datetime, timezone
from typing import Dict, Any, List, Optional

from ..models.schemas import (
    Country, Destination, Hotel, Attraction, Trip, TripDetail, BudgetAllocation,
    TourGuide, TourGuideReview, TourGuidePhoto, TripSearchParams,
)
from .seed import seed_sample_data


class MemStorage:
    """In-memory tables keyed by integer id, one counter per table.

    Nothing here is locked: handlers run on a single event loop and never
    interleave mid-call. Data is gone when the process exits.
    """

    def __init__(self, seed: bool = True):
        self.countries: Dict[str, Country] = {}
        self.destinations: Dict[int, Destination] = {}
        self.hotels: Dict[int, Hotel] = {}
        self.attractions: Dict[int, Attraction] = {}
        self.trips: Dict[int, Trip] = {}
        self.trip_details: Dict[int, TripDetail] = {}
        self.budget_allocations: Dict[int, BudgetAllocation] = {}
        self.tour_guides: Dict[int, TourGuide] = {}
        self.tour_guide_reviews: Dict[int, TourGuideReview] = {}
        self.tour_guide_photos: Dict[int, TourGuidePhoto] = {}
        self._ids = defaultdict(lambda: itertools.count(1))

        if seed:
            seed_sample_data(self)

    def _next_id(self, table: str) -> int:
        return next(self._ids[table])

    # ---------- countries ----------

    def add_country(self, data: Dict[str, Any]) -> Country:
        country = Country.model_validate(data)
        self.countries[country.code] = country
        return country

    def get_countries(self) -> List[Country]:
        return list(self.countries.values())

    def get_country_by_code(self, code: str) -> Optional[Country]:
        return self.countries.get(code)

    # ---------- destinations ----------

    def get_destinations(self) -> List[Destination]:
        return list(self.destinations.values())

    def get_destination(self, destination_id: int) -> Optional[Destination]:
        return self.destinations.get(destination_id)

    def create_destination(self, data: Dict[str, Any]) -> Destination:
        dest = Destination.model_validate({**data, "id": self._next_id("destinations")})
        self.destinations[dest.id] = dest
        return dest

    def search_destinations(self, params: TripSearchParams) -> List[Destination]:
        results = self.get_destinations()

        if params.destination:
            term = params.destination.lower()
            results = [d for d in results if term in d.name.lower() or term in d.country.lower()]

        if params.budget:
            travelers = params.travelers or 1
            results = [d for d in results if d.price_per_person * travelers <= params.budget]
            results.sort(key=lambda d: d.budget_match, reverse=True)

        if params.trip_type:
            trip_type = params.trip_type.lower()
            results = [d for d in results if any(tag.lower() == trip_type for tag in d.tags)]

        return results

    # ---------- hotels ----------

    def get_hotels(self, destination_id: int) -> List[Hotel]:
        return [h for h in self.hotels.values() if h.destination_id == destination_id]

    def get_hotel(self, hotel_id: int) -> Optional[Hotel]:
        return self.hotels.get(hotel_id)

    def create_hotel(self, data: Dict[str, Any]) -> Hotel:
        hotel = Hotel.model_validate({**data, "id": self._next_id("hotels")})
        self.hotels[hotel.id] = hotel
        return hotel

    # ---------- attractions ----------

    def get_attractions(self, destination_id: int) -> List[Attraction]:
        return [a for a in self.attractions.values() if a.destination_id == destination_id]

    def get_attraction(self, attraction_id: int) -> Optional[Attraction]:
        return self.attractions.get(attraction_id)

    def create_attraction(self, data: Dict[str, Any]) -> Attraction:
        attraction = Attraction.model_validate({**data, "id": self._next_id("attractions")})
        self.attractions[attraction.id] = attraction
        return attraction

    # ---------- trips ----------

    def get_trips(self, user_id: Optional[int] = None) -> List[Trip]:
        trips = list(self.trips.values())
        if user_id:
            trips = [t for t in trips if t.user_id == user_id]
        return trips

    def get_trip(self, trip_id: int) -> Optional[Trip]:
        return self.trips.get(trip_id)

    def create_trip(self, data: Dict[str, Any]) -> Trip:
        trip = Trip.model_validate({
            **data,
            "id": self._next_id("trips"),
            "created_at": datetime.now(timezone.utc),
            "travelers": data.get("travelers") or 1,
        })
        self.trips[trip.id] = trip
        return trip

    def update_trip(self, trip_id: int, update: Dict[str, Any]) -> Optional[Trip]:
        trip = self.trips.get(trip_id)
        if trip is None:
            return None
        updated = trip.model_copy(update=update)
        self.trips[trip_id] = updated
        return updated

    def delete_trip(self, trip_id: int) -> bool:
        # details and budget allocation are kept
        return self.trips.pop(trip_id, None) is not None

    # ---------- trip details ----------

    def get_trip_details(self, trip_id: int) -> List[TripDetail]:
        details = [d for d in self.trip_details.values() if d.trip_id == trip_id]
        return sorted(details, key=lambda d: d.day)

    def create_trip_detail(self, data: Dict[str, Any]) -> TripDetail:
        detail = TripDetail.model_validate({**data, "id": self._next_id("trip_details")})
        self.trip_details[detail.id] = detail
        return detail

    # ---------- budget allocations ----------

    def get_budget_allocation(self, trip_id: int) -> Optional[BudgetAllocation]:
        return next((a for a in self.budget_allocations.values() if a.trip_id == trip_id), None)

    def create_budget_allocation(self, data: Dict[str, Any]) -> BudgetAllocation:
        allocation = BudgetAllocation.model_validate({**data, "id": self._next_id("budget_allocations")})
        self.budget_allocations[allocation.id] = allocation
        return allocation

    def update_budget_allocation(self, trip_id: int, update: Dict[str, Any]) -> Optional[BudgetAllocation]:
        allocation = self.get_budget_allocation(trip_id)
        if allocation is None:
            return None
        updated = allocation.model_copy(update=update)
        self.budget_allocations[allocation.id] = updated
        return updated

    # ---------- tour guides ----------

    def get_tour_guides(self) -> List[TourGuide]:
        return list(self.tour_guides.values())

    def get_tour_guide(self, guide_id: int) -> Optional[TourGuide]:
        return self.tour_guides.get(guide_id)

    def create_tour_guide(self, data: Dict[str, Any]) -> TourGuide:
        guide = TourGuide.model_validate({**data, "id": self._next_id("tour_guides")})
        self.tour_guides[guide.id] = guide
        return guide

    def get_tour_guide_reviews(self, guide_id: int) -> List[TourGuideReview]:
        return [r for r in self.tour_guide_reviews.values() if r.tour_guide_id == guide_id]

    def create_tour_guide_review(self, data: Dict[str, Any]) -> TourGuideReview:
        review = TourGuideReview.model_validate({**data, "id": self._next_id("tour_guide_reviews")})
        self.tour_guide_reviews[review.id] = review
        return review

    def get_tour_guide_photos(self, guide_id: int) -> List[TourGuidePhoto]:
        return [p for p in self.tour_guide_photos.values() if p.tour_guide_id == guide_id]

    def create_tour_guide_photo(self, data: Dict[str, Any]) -> TourGuidePhoto:
        photo = TourGuidePhoto.model_validate({**data, "id": self._next_id("tour_guide_photos")})
        self.tour_guide_photos[photo.id] = photo
        return photo
