import random
from typing import List, Optional

from ..models.schemas import Activity, DayPlan
from .budget import round_half_up

DEFAULT_EXPERIENCE = "Cultural"

def day_title(destination: str, day: int, duration: int) -> str:
    # day 1 wins when the trip is a single day
    if day == 1:
        return f"Welcome to {destination}"
    if day == duration:
        return f"Farewell to {destination}"
    return f"Exploring {destination} - Day {day}"

def _experience_title(destination: str, day: int, preferences: List[str], rng) -> str:
    if day == 1:
        return f"{destination} Orientation Tour"
    tag = rng.choice(preferences) if preferences else DEFAULT_EXPERIENCE
    return f"{destination} {tag} Experience"

def _day_activities(destination: str, day: int, duration: int, budget: float,
                    preferences: List[str], rng) -> List[Activity]:
    def cost(fraction: float) -> int:
        return round_half_up(budget * fraction)

    return [
        Activity(time="08:00", title="Breakfast at hotel",
                 description="Start your day with a delicious breakfast",
                 location="Hotel", type="breakfast", cost=cost(0.01)),
        Activity(time="10:00", title=_experience_title(destination, day, preferences, rng),
                 description="Explore the highlights of the area",
                 location="City Center", type="sightseeing", cost=cost(0.02)),
        Activity(time="13:00", title="Lunch break",
                 description="Enjoy local cuisine at a recommended restaurant",
                 location="Local Restaurant", type="lunch", cost=cost(0.015)),
        Activity(time="15:00",
                 title="Souvenir Shopping" if day == duration else f"{destination} Attraction Visit",
                 description="Visit a popular local attraction",
                 location="Tourist Area", type="sightseeing", cost=cost(0.025)),
        Activity(time="19:00", title="Dinner experience",
                 description="Savor the local flavors at a recommended venue",
                 location="Restaurant District", type="dinner", cost=cost(0.03)),
    ]

def synthesize(destination_name: str, duration: int, budget: float,
               preferences: Optional[List[str]] = None, rng=None) -> List[DayPlan]:
    """One templated day plan per day of the trip.

    ``rng`` only needs a ``choice`` method; it picks the preference tag for the
    mid-morning experience. Defaults to the unseeded module generator, so two
    calls with the same inputs may label that activity differently.
    """
    rng = rng or random
    preferences = list(preferences or [])
    return [
        DayPlan(
            day=day,
            title=day_title(destination_name, day, duration),
            activities=_day_activities(destination_name, day, duration, budget, preferences, rng),
        )
        for day in range(1, duration + 1)
    ]
