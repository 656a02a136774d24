import random

import pytest

from apps.api.tools.itinerary import day_title, synthesize


@pytest.mark.parametrize("duration", [0, 1, 2, 5, 30])
def test_one_plan_per_day(duration):
    plans = synthesize("Lisbon", duration, 1000, [])
    assert len(plans) == duration
    assert [p.day for p in plans] == list(range(1, duration + 1))


def test_negative_duration_yields_nothing():
    assert synthesize("Lisbon", -3, 1000, []) == []


def test_titles():
    plans = synthesize("Lisbon", 4, 1000, [])
    assert [p.title for p in plans] == [
        "Welcome to Lisbon",
        "Exploring Lisbon - Day 2",
        "Exploring Lisbon - Day 3",
        "Farewell to Lisbon",
    ]


def test_single_day_trip_is_welcome():
    assert day_title("Lisbon", 1, 1) == "Welcome to Lisbon"
    (plan,) = synthesize("Lisbon", 1, 1000, [])
    assert plan.title == "Welcome to Lisbon"
    # still the last day, so the afternoon slot is shopping
    assert plan.activities[3].title == "Souvenir Shopping"


def test_slots_and_costs():
    plan = synthesize("Lisbon", 3, 1000, [])[1]
    assert [a.time for a in plan.activities] == ["08:00", "10:00", "13:00", "15:00", "19:00"]
    assert [a.type for a in plan.activities] == ["breakfast", "sightseeing", "lunch", "sightseeing", "dinner"]
    assert [a.cost for a in plan.activities] == [10, 20, 15, 25, 30]
    assert plan.activities[3].title == "Lisbon Attraction Visit"


def test_first_day_is_orientation():
    plan = synthesize("Lisbon", 2, 1000, ["Food"])[0]
    assert plan.activities[1].title == "Lisbon Orientation Tour"


def test_experience_defaults_to_cultural():
    plans = synthesize("Lisbon", 3, 1000, [])
    assert plans[1].activities[1].title == "Lisbon Cultural Experience"


def test_experience_uses_a_preference():
    prefs = ["Food", "Nightlife", "History"]
    plans = synthesize("Lisbon", 10, 500, prefs, rng=random.Random(3))
    for plan in plans[1:]:
        title = plan.activities[1].title
        assert title.startswith("Lisbon ") and title.endswith(" Experience")
        assert title[len("Lisbon "):-len(" Experience")] in prefs


def test_seeded_rng_is_reproducible():
    prefs = ["Food", "Nightlife", "History", "Art"]
    a = synthesize("Lisbon", 6, 800, prefs, rng=random.Random(42))
    b = synthesize("Lisbon", 6, 800, prefs, rng=random.Random(42))
    assert a == b


class FixedChoice:
    def choice(self, seq):
        return seq[-1]


def test_rng_only_needs_choice():
    plans = synthesize("Lisbon", 2, 1000, ["Food", "Art"], rng=FixedChoice())
    assert plans[1].activities[1].title == "Lisbon Art Experience"
