import contextlib
import logging
from starlette.applications import Starlette
from starlette.responses import JSONResponse, PlainTextResponse
from starlette.requests import Request
from starlette.routing import Route
from config import settings
from db import init_db, RideStore
from errors import ApiError, ServerError
from logging_config import setup_logging
from models import RideInput, ride_to_dict
from rides import RideService

logger = logging.getLogger(__name__)


async def health(request: Request):
    return PlainTextResponse("Healthy")


async def create_ride(request: Request):
    try:
        payload = await request.json()
    except ValueError:
        # unparsable body is treated as an empty ride and fails validation
        payload = None
    rows = request.app.state.rides.create_ride(RideInput.from_payload(payload))
    return JSONResponse([ride_to_dict(r) for r in rows])


async def list_rides(request: Request):
    page = request.query_params.get("page")
    size = request.query_params.get("size")
    rows = request.app.state.rides.list_rides(page, size)
    return JSONResponse([ride_to_dict(r) for r in rows])


async def get_ride(request: Request):
    rows = request.app.state.rides.get_ride(request.path_params["ride_id"])
    return JSONResponse([ride_to_dict(r) for r in rows])


async def api_error(request: Request, exc: ApiError):
    return JSONResponse(exc.to_dict(), status_code=exc.status_code)


async def unexpected_error(request: Request, exc: Exception):
    logger.error("unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    error = ServerError()
    return JSONResponse(error.to_dict(), status_code=error.status_code)


routes = [
    Route("/health", health, methods=["GET"]),
    Route("/rides", create_ride, methods=["POST"]),
    Route("/rides", list_rides, methods=["GET"]),
    Route("/rides/{ride_id}", get_ride, methods=["GET"]),
]


def create_app(store=None) -> Starlette:
    """Build the API around ``store``; the default is the SQL store on DATABASE_URL.

    Tables are created on startup only for the default store.
    """
    setup_logging(settings.log_level, settings.log_file)

    @contextlib.asynccontextmanager
    async def lifespan(app):
        if store is None:
            init_db()
            logger.info("database ready")
        yield

    app = Starlette(
        routes=routes,
        # Exception goes to ServerErrorMiddleware, which re-raises after responding
        exception_handlers={ApiError: api_error, Exception: unexpected_error},
        lifespan=lifespan,
    )
    app.state.rides = RideService(store if store is not None else RideStore(), settings.default_page_size)
    return app


app = create_app()
