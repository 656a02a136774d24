from typing import List, Dict, Any
from fastapi import APIRouter, Body, Depends
from pydantic import ValidationError

from ..errors import InvalidRequestError, NotFoundError
from ..memory.store import MemStorage
from ..models.schemas import (
    Country, Destination, Hotel, HotelListing, Attraction, AttractionListing,
    TourGuide, TourGuideCreate, TourGuideReview, TourGuideReviewCreate,
    TourGuidePhoto, TourGuidePhotoCreate, TripSearchParams,
)
from .deps import get_store

router = APIRouter(prefix="/api")


def _listing(model, record, destination) -> Any:
    return model(
        **record.model_dump(),
        destination_name=destination.name if destination else None,
        country=destination.country if destination else None,
    )


# ---------- countries ----------

@router.get("/countries", response_model=List[Country])
async def list_countries(store: MemStorage = Depends(get_store)):
    return store.get_countries()

@router.get("/countries/{code}", response_model=Country)
async def get_country(code: str, store: MemStorage = Depends(get_store)):
    country = store.get_country_by_code(code)
    if country is None:
        raise NotFoundError("Country not found")
    return country


# ---------- destinations ----------

@router.get("/destinations", response_model=List[Destination])
async def list_destinations(store: MemStorage = Depends(get_store)):
    return store.get_destinations()

@router.get("/destinations/{destination_id}", response_model=Destination)
async def get_destination(destination_id: int, store: MemStorage = Depends(get_store)):
    dest = store.get_destination(destination_id)
    if dest is None:
        raise NotFoundError("Destination not found")
    return dest

@router.post("/destinations/search", response_model=List[Destination])
async def search_destinations(payload: Dict[str, Any] = Body(...),
                              store: MemStorage = Depends(get_store)):
    try:
        params = TripSearchParams.model_validate(payload)
    except ValidationError as e:
        raise InvalidRequestError(
            "Invalid search parameters",
            errors=e.errors(include_url=False, include_context=False),
        )
    return store.search_destinations(params)


# ---------- hotels ----------

@router.get("/destinations/{destination_id}/hotels", response_model=List[HotelListing])
async def list_destination_hotels(destination_id: int, store: MemStorage = Depends(get_store)):
    dest = store.get_destination(destination_id)
    return [_listing(HotelListing, h, dest) for h in store.get_hotels(destination_id)]

@router.get("/hotels", response_model=List[HotelListing])
async def list_hotels(store: MemStorage = Depends(get_store)):
    return [
        _listing(HotelListing, h, dest)
        for dest in store.get_destinations()
        for h in store.get_hotels(dest.id)
    ]

@router.get("/hotels/{hotel_id}", response_model=Hotel)
async def get_hotel(hotel_id: int, store: MemStorage = Depends(get_store)):
    hotel = store.get_hotel(hotel_id)
    if hotel is None:
        raise NotFoundError("Hotel not found")
    return hotel


# ---------- attractions ----------

@router.get("/destinations/{destination_id}/attractions", response_model=List[AttractionListing])
async def list_destination_attractions(destination_id: int, store: MemStorage = Depends(get_store)):
    dest = store.get_destination(destination_id)
    return [_listing(AttractionListing, a, dest) for a in store.get_attractions(destination_id)]

@router.get("/attractions", response_model=List[AttractionListing])
async def list_attractions(store: MemStorage = Depends(get_store)):
    return [
        _listing(AttractionListing, a, dest)
        for dest in store.get_destinations()
        for a in store.get_attractions(dest.id)
    ]

@router.get("/attractions/{attraction_id}", response_model=Attraction)
async def get_attraction(attraction_id: int, store: MemStorage = Depends(get_store)):
    attraction = store.get_attraction(attraction_id)
    if attraction is None:
        raise NotFoundError("Attraction not found")
    return attraction


# ---------- tour guides ----------

@router.get("/tour-guides", response_model=List[TourGuide])
async def list_tour_guides(store: MemStorage = Depends(get_store)):
    return store.get_tour_guides()

@router.get("/tour-guides/{guide_id}", response_model=TourGuide)
async def get_tour_guide(guide_id: int, store: MemStorage = Depends(get_store)):
    guide = store.get_tour_guide(guide_id)
    if guide is None:
        raise NotFoundError("Tour guide not found")
    return guide

@router.post("/tour-guides", response_model=TourGuide, status_code=201)
async def create_tour_guide(guide: TourGuideCreate, store: MemStorage = Depends(get_store)):
    return store.create_tour_guide(guide.model_dump())

@router.get("/tour-guides/{guide_id}/reviews", response_model=List[TourGuideReview])
async def list_tour_guide_reviews(guide_id: int, store: MemStorage = Depends(get_store)):
    return store.get_tour_guide_reviews(guide_id)

@router.post("/tour-guides/{guide_id}/reviews", response_model=TourGuideReview, status_code=201)
async def create_tour_guide_review(guide_id: int, review: TourGuideReviewCreate,
                                   store: MemStorage = Depends(get_store)):
    return store.create_tour_guide_review({**review.model_dump(), "tour_guide_id": guide_id})

@router.get("/tour-guides/{guide_id}/photos", response_model=List[TourGuidePhoto])
async def list_tour_guide_photos(guide_id: int, store: MemStorage = Depends(get_store)):
    return store.get_tour_guide_photos(guide_id)

@router.post("/tour-guides/{guide_id}/photos", response_model=TourGuidePhoto, status_code=201)
async def create_tour_guide_photo(guide_id: int, photo: TourGuidePhotoCreate,
                                  store: MemStorage = Depends(get_store)):
    return store.create_tour_guide_photo({**photo.model_dump(), "tour_guide_id": guide_id})
