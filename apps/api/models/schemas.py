from datetime import datetime
from typing import List, Optional, Dict, Any, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    # camelCase on the wire, snake_case in Python
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------- catalogue ----------

class Country(ApiModel):
    name: str
    code: str
    cities: List[str] = Field(default_factory=list)

class Destination(ApiModel):
    id: int
    name: str
    country: str
    description: str
    image_url: str
    rating: float
    review_count: int
    price_per_person: int
    duration_days: int
    tags: List[str] = Field(default_factory=list)
    budget_match: int

class Hotel(ApiModel):
    id: int
    name: str
    destination_id: int
    description: str
    image_url: str
    location: str
    distance_from_center: float
    rating: float
    review_count: int
    price_per_night: int
    facilities: List[str] = Field(default_factory=list)
    label: Optional[str] = None  # "Recommended", "Best Value", ...
    discount_info: Optional[str] = None
    within_budget: bool

class Attraction(ApiModel):
    id: int
    name: str
    destination_id: int
    description: str
    image_url: str
    location: str
    type: str  # "Sightseeing", "Tour", "Food & Drink", ...
    rating: float
    review_count: int
    price: int
    within_budget: bool
    label: Optional[str] = None

class HotelListing(Hotel):
    destination_name: Optional[str] = None
    country: Optional[str] = None

class AttractionListing(Attraction):
    destination_name: Optional[str] = None
    country: Optional[str] = None

class TourGuideCreate(ApiModel):
    name: str
    location: str
    bio: str
    image_url: str
    rating: float
    review_count: int
    specialties: List[str] = Field(default_factory=list)
    languages: List[str] = Field(default_factory=list)
    price_per_day: int
    years_experience: int
    tours_completed: int
    certifications: List[str] = Field(default_factory=list)
    contact_email: str
    contact_phone: str

class TourGuide(TourGuideCreate):
    id: int

class TourGuideReviewCreate(ApiModel):
    reviewer_name: str
    reviewer_image: str
    rating: float
    comment: str
    date: str
    tour_location: str

class TourGuideReview(TourGuideReviewCreate):
    id: int
    tour_guide_id: int

class TourGuidePhotoCreate(ApiModel):
    image_url: str
    location: str
    date: str

class TourGuidePhoto(TourGuidePhotoCreate):
    id: int
    tour_guide_id: int

class TripSearchParams(ApiModel):
    destination: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    budget: Optional[float] = Field(None, ge=0)
    trip_type: Optional[str] = None
    travelers: int = Field(1, gt=0)


# ---------- trips ----------

class Activity(ApiModel):
    time: str
    title: Optional[str] = None
    description: str = ""
    location: Optional[str] = None
    type: Optional[str] = None  # breakfast / lunch / dinner / sightseeing ...
    cost: Optional[int] = None

class DayPlan(ApiModel):
    day: int
    title: str
    activities: List[Activity] = Field(default_factory=list)

class TripDetailCreate(DayPlan):
    pass

class TripDetail(DayPlan):
    id: int
    trip_id: int

class BudgetSplit(ApiModel):
    accommodation: int
    transportation: int
    food: int
    activities: int
    miscellaneous: int

class BudgetAllocation(BudgetSplit):
    id: int
    trip_id: int

class BudgetAllocationUpdate(ApiModel):
    accommodation: Optional[int] = None
    transportation: Optional[int] = None
    food: Optional[int] = None
    activities: Optional[int] = None
    miscellaneous: Optional[int] = None

class TripCreate(ApiModel):
    """Incoming trip request. Required fields are checked by the trip pipeline,
    so that a missing one is reported by name rather than as a schema error."""
    destination_id: Optional[int] = None
    start_date: Optional[str] = None  # YYYY-MM-DD
    end_date: Optional[str] = None
    budget: Optional[Union[int, float]] = None
    travelers: Optional[int] = None
    duration: Optional[int] = None
    preferences: List[str] = Field(default_factory=list)
    trip_type: Optional[str] = None
    hotel_id: Optional[int] = None
    total_cost: Optional[Union[int, float]] = None
    user_id: Optional[int] = None
    tour_guide_requested: bool = False

    @field_validator("preferences", mode="before")
    @classmethod
    def _preferences_list(cls, v: Any) -> List[str]:
        if not isinstance(v, list):
            return []
        return [str(p) for p in v]

    @field_validator("tour_guide_requested", mode="before")
    @classmethod
    def _strict_true(cls, v: Any) -> bool:
        return v is True

class Trip(ApiModel):
    id: int
    user_id: Optional[int] = None
    destination_id: int
    start_date: str
    end_date: Optional[str] = None
    duration: int
    budget: Union[int, float]
    travelers: int = 1
    trip_type: Optional[str] = None
    preferences: List[str] = Field(default_factory=list)
    hotel_id: Optional[int] = None
    total_cost: Optional[Union[int, float]] = None
    tour_guide_requested: bool = False
    created_at: datetime

class TripUpdate(ApiModel):
    user_id: Optional[int] = None
    destination_id: Optional[int] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    duration: Optional[int] = None
    budget: Optional[Union[int, float]] = None
    travelers: Optional[int] = None
    trip_type: Optional[str] = None
    preferences: Optional[List[str]] = None
    hotel_id: Optional[int] = None
    total_cost: Optional[Union[int, float]] = None
    tour_guide_requested: Optional[bool] = None


def changes(update: BaseModel) -> Dict[str, Any]:
    """Fields the client actually sent, for shallow merges."""
    return update.model_dump(exclude_unset=True)
