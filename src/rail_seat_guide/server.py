import asyncio
import logging
from datetime import datetime
from typing import Optional

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from . import __version__
from .errors import ConfigurationMissingError, SeatGuideError, StationNotFoundError
from .models.query import Direction, SeatDirectionRequest
from .services.catalog_service import CatalogService
from .services.direction_service import resolve_direction
from .services.station_service import StationService
from .utils.config import get_settings

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)
station_service = StationService()
catalog_service = CatalogService(station_service=station_service)

SERVER_NAME = "rail-seat-guide"

app = FastAPI(
    title="Rail Seat Guide",
    version=__version__,
    description="Front and back facing seats per train, coach and direction of travel",
    debug=settings.debug
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"]
)


@app.exception_handler(SeatGuideError)
async def seat_guide_error_handler(request: Request, exc: SeatGuideError):
    status = 422 if isinstance(exc, ConfigurationMissingError) else 404
    logger.info(f"{request.url.path}: {exc.code} - {exc.message}")
    return JSONResponse({"error": exc.code, "message": exc.message}, status_code=status)


def _parse_direction(direction: Optional[str]) -> Optional[Direction]:
    if direction is None or not direction.strip():
        return None
    try:
        return Direction(direction.strip().lower())
    except ValueError:
        raise HTTPException(status_code=400, detail=f"direction must be 'forward' or 'reverse', got {direction!r}")


@app.get("/")
async def root():
    return {
        "name": SERVER_NAME,
        "version": __version__,
        "status": "running",
        "stations_loaded": len(catalog_service.stations),
        "trains_loaded": len(catalog_service.trains),
    }


@app.get("/health")
async def health():
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "stations": len(catalog_service.stations),
        "coaches": len(catalog_service.coaches),
        "trains": len(catalog_service.trains),
    }


@app.get("/api/stations/search")
async def search_stations(q: str = Query(..., description="Station title or code"),
                          limit: int = Query(10, ge=1, le=50)):
    return station_service.search_stations(q, limit=limit).model_dump()


@app.get("/api/stations")
async def list_stations():
    stations = [s.model_dump() for s in station_service.stations]
    return {"stations": stations, "total": len(stations)}


@app.get("/api/stations/by-code/{code}")
async def get_station_by_code(code: str):
    station = station_service.get_station_by_code(code)
    if station is None:
        raise StationNotFoundError(f"Station {code!r} not found")
    return station.model_dump()


@app.get("/api/classes")
async def list_travel_classes():
    classes = [c.model_dump(exclude_none=True) for c in catalog_service.travel_classes.values()]
    return {"classes": classes, "total": len(classes)}


@app.get("/api/trains/search")
async def search_trains(from_station: Optional[str] = Query(None, alias="from"),
                        to_station: Optional[str] = Query(None, alias="to"),
                        query: Optional[str] = None,
                        limit: int = Query(50, ge=1, le=200)):
    result = catalog_service.search_trains(from_station, to_station, query, limit=limit)
    return result.model_dump(mode="json")


@app.get("/api/trains/route/{route_code}")
async def get_train_by_route_code(route_code: str, layout: bool = False):
    """Seats for the direction a route code implies"""
    request = SeatDirectionRequest(train=route_code, include_layout=layout)
    return catalog_service.train_seats(request).model_dump(mode="json")


@app.get("/api/trains/{train_id}")
async def get_train(train_id: str,
                    from_station: Optional[str] = Query(None, alias="from"),
                    to_station: Optional[str] = Query(None, alias="to"),
                    direction: Optional[str] = None):
    train = catalog_service.get_train(train_id)
    request = SeatDirectionRequest(
        train=train_id,
        direction=_parse_direction(direction),
        from_station=from_station,
        to_station=to_station,
    )
    info = resolve_direction(train, request)
    summary = catalog_service.summarize(train, info).model_dump(mode="json")
    summary["stations"] = [s.model_dump() for s in train.stations]
    summary["coaches"] = [
        {"code": tc.coach.code, "position": tc.position} for tc in train.coaches
    ]
    return summary


@app.get("/api/trains/{train_id}/seats")
async def get_train_seats(train_id: str,
                          from_station: Optional[str] = Query(None, alias="from"),
                          to_station: Optional[str] = Query(None, alias="to"),
                          direction: Optional[str] = None,
                          coach: Optional[str] = None,
                          layout: bool = False):
    request = SeatDirectionRequest(
        train=train_id,
        direction=_parse_direction(direction),
        from_station=from_station,
        to_station=to_station,
        coach=coach,
        include_layout=layout,
    )
    return catalog_service.train_seats(request).model_dump(mode="json")


@app.get("/api/trains/{train_id}/coaches")
async def list_train_coaches(train_id: str):
    train = catalog_service.get_train(train_id)
    coaches = []
    for tc in train.coaches:
        travel_class = catalog_service.class_of(train, tc, tc.coach)
        coaches.append({
            "code": tc.coach.code,
            "position": tc.position,
            "travel_class": travel_class.code if travel_class else tc.coach.travel_class,
        })
    return {"train": train.number, "coaches": coaches, "total": len(coaches)}


@app.get("/api/trains/{train_id}/coaches/{coach_code}")
async def get_train_coach(train_id: str, coach_code: str,
                          from_station: Optional[str] = Query(None, alias="from"),
                          to_station: Optional[str] = Query(None, alias="to"),
                          direction: Optional[str] = None):
    request = SeatDirectionRequest(
        train=train_id,
        direction=_parse_direction(direction),
        from_station=from_station,
        to_station=to_station,
        coach=coach_code,
        include_layout=True,
    )
    seats = catalog_service.train_seats(request)
    payload = seats.coaches[0].model_dump(mode="json")
    payload["train"] = seats.train.model_dump(mode="json")
    payload["direction_info"] = seats.direction.model_dump(mode="json")
    return payload


@app.get("/api/coaches")
async def list_coaches(travel_class: Optional[str] = Query(None, alias="class")):
    """Coach codes with their travel class"""
    coaches = [
        {"code": c.code, "title": c.title, "travel_class": c.travel_class}
        for c in catalog_service.coaches.values()
        if not travel_class or (c.travel_class or "").upper() == travel_class.strip().upper()
    ]
    return {"coaches": coaches, "total": len(coaches)}


@app.get("/api/coaches/{code}")
async def get_coach(code: str, direction: Optional[str] = None, layout: bool = True):
    is_reverse = _parse_direction(direction) == Direction.REVERSE
    return catalog_service.template_seats(code, is_reverse=is_reverse, include_layout=layout).model_dump(mode="json")


@app.on_event("startup")
async def startup_event():
    """Load the catalog snapshot"""
    logger.info("🚀 Starting rail seat guide...")
    logger.info("📚 Loading catalog...")
    await catalog_service.load_catalog()
    logger.info(f"✅ {len(catalog_service.trains)} trains, {len(catalog_service.coaches)} coaches loaded")


async def main_server():
    """Run the API server"""
    logger.info("🚀 Starting rail seat guide...")
    logger.info(f"📡 API: http://{settings.server_host}:{settings.server_port}/api")
    logger.info(f"📚 Health check: http://{settings.server_host}:{settings.server_port}/health")

    config = uvicorn.Config(
        app,
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower()
    )
    uvicorn_server = uvicorn.Server(config)
    await uvicorn_server.serve()


def main():
    asyncio.run(main_server())


if __name__ == "__main__":
    main()
