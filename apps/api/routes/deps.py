from fastapi import Request

from ..memory.store import MemStorage


def get_store(request: Request) -> MemStorage:
    return request.app.state.store


def get_trip_graph(request: Request):
    return request.app.state.trip_graph
