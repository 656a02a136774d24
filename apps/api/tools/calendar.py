from ics import Calendar, Event
from datetime import timedelta
from typing import List

from ..models.schemas import Trip, TripDetail
from .dates import parse_when

def _activity_line(activity) -> str:
    label = activity.title or activity.description
    return f"{activity.time} {label}".strip()

def make_ics(trip: Trip, destination_name: str, details: List[TripDetail]) -> str:
    """Render the stored day plans of ``trip`` as an iCalendar document.

    One event per detail, 09:00 to 17:00 on the trip's n-th day.
    """
    cal = Calendar()
    d0 = parse_when(trip.start_date)
    for detail in details:
        ev = Event()
        ev.name = f"{destination_name}: Day {detail.day} - {detail.title}"
        ev.begin = d0 + timedelta(days=detail.day - 1, hours=9)
        ev.duration = timedelta(hours=8)
        ev.description = "\n".join(_activity_line(a) for a in detail.activities)
        ev.location = destination_name
        cal.events.add(ev)
    return cal.serialize()

def ics_filename(destination_name: str, start_date: str) -> str:
    return f"{destination_name.lower().replace(' ', '_')}_{start_date}.ics"
