from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import config
from .errors import ApiError
from .graph import build_trip_graph
from .memory.store import MemStorage
from .routes import catalog, trips

log = config.get_logger(__name__)


def create_app(store: MemStorage | None = None, rng=None) -> FastAPI:
    """Build the API around ``store``; ``rng`` feeds itinerary labelling."""
    app = FastAPI(title=config.API_TITLE, version=config.API_VERSION)

    app.state.store = store if store is not None else MemStorage(seed=config.SEED_SAMPLE_DATA)
    app.state.trip_graph = build_trip_graph(app.state.store, rng=rng)

    if config.CORS_ORIGINS:
        app.add_middleware(CORSMiddleware, allow_origins=config.CORS_ORIGINS,
                           allow_methods=["*"], allow_headers=["*"])

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        if exc.status_code >= 500:
            log.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content=jsonable_encoder(exc.to_dict()))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={"message": "Invalid request", "errors": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        log.error("%s %s failed", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"message": "Internal server error"})

    @app.get("/health")
    async def health():
        return {"ok": True, "destinations": len(app.state.store.get_destinations())}

    app.include_router(catalog.router)
    app.include_router(trips.router)
    return app


app = create_app()
