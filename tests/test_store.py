from apps.api.memory.store import MemStorage
from apps.api.models.schemas import TripSearchParams


def _trip(store, **kw):
    data = {"destination_id": 1, "start_date": "2024-01-01", "duration": 2, "budget": 100}
    data.update(kw)
    return store.create_trip(data)


def test_unseeded_store_is_empty():
    store = MemStorage(seed=False)
    assert store.get_destinations() == []
    assert store.get_trips() == []
    assert store.get_countries() == []


def test_ids_are_per_table():
    store = MemStorage(seed=False)
    a = _trip(store)
    b = _trip(store)
    detail = store.create_trip_detail({"trip_id": a.id, "day": 1, "title": "x"})
    assert (a.id, b.id, detail.id) == (1, 2, 1)


def test_ids_are_not_reused_after_delete():
    store = MemStorage(seed=False)
    a = _trip(store)
    assert store.delete_trip(a.id)
    assert not store.delete_trip(a.id)
    assert _trip(store).id == 2


def test_create_trip_defaults():
    trip = _trip(MemStorage(seed=False), travelers=None)
    assert trip.travelers == 1
    assert trip.created_at is not None
    assert trip.hotel_id is None


def test_details_sorted_by_day():
    store = MemStorage(seed=False)
    for day in (3, 1, 2):
        store.create_trip_detail({"trip_id": 5, "day": day, "title": f"day {day}"})
    store.create_trip_detail({"trip_id": 6, "day": 1, "title": "other trip"})
    assert [d.day for d in store.get_trip_details(5)] == [1, 2, 3]


def test_update_is_shallow_merge():
    store = MemStorage(seed=False)
    trip = _trip(store, trip_type="Beach")
    updated = store.update_trip(trip.id, {"budget": 250})
    assert updated.budget == 250
    assert updated.trip_type == "Beach"
    assert updated.created_at == trip.created_at
    assert store.update_trip(99, {"budget": 1}) is None


def test_budget_allocation_lookup_by_trip():
    store = MemStorage(seed=False)
    store.create_budget_allocation({"trip_id": 9, "accommodation": 1, "transportation": 2,
                                    "food": 3, "activities": 4, "miscellaneous": 5})
    assert store.get_budget_allocation(9).food == 3
    assert store.get_budget_allocation(8) is None
    assert store.update_budget_allocation(9, {"food": 30}).food == 30
    assert store.update_budget_allocation(8, {"food": 30}) is None


def test_seeded_sample_trip():
    store = MemStorage()
    trip = store.get_trip(1)
    assert trip.destination_id == 1
    assert trip.travelers == 2
    assert [d.title for d in store.get_trip_details(1)] == [
        "Arrival & Exploration", "Gaudí Masterpieces", "Beach & Culture",
    ]
    assert store.get_budget_allocation(1).accommodation == 800


def test_search_combines_filters():
    store = MemStorage()
    params = TripSearchParams(destination="a", budget=1500, trip_type="Beach")
    assert [d.name for d in store.search_destinations(params)] == ["Barcelona", "Santorini"]
    params = TripSearchParams(destination="tok", trip_type="Beach")
    assert store.search_destinations(params) == []
