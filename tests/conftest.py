"""
Shared fixtures: a small railway network built in code and the bundled
catalog snapshot.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from rail_seat_guide.models import (  # noqa: E402
    Coach,
    SeatRangeConfig,
    Station,
    Train,
    TrainClassGroup,
    TrainCoach,
    TravelClass,
)
from rail_seat_guide.services.catalog_service import CatalogService  # noqa: E402
from rail_seat_guide.utils.config import DEFAULT_CATALOG_PATH  # noqa: E402

DHAKA = Station(code="DHA", title="Dhaka", division="Dhaka")
JOYDEBPUR = Station(code="JOY", title="Joydebpur", division="Dhaka")
NATORE = Station(code="NTR", title="Natore", division="Rajshahi")
PANCHAGARH = Station(code="PCG", title="Panchagarh", division="Rangpur")


@pytest.fixture
def uma_coach():
    return Coach(
        code="UMA",
        travel_class="S_CHAIR",
        seat_config=SeatRangeConfig(total_seats=60, front_range=(1, 30), auto_back_fill=True),
    )


@pytest.fixture
def chair_class():
    return TravelClass(
        code="S_CHAIR",
        name="Shovan Chair",
        seat_config=SeatRangeConfig(total_seats=60, layout="mixed"),
        seats_per_block=5,
    )


@pytest.fixture
def ekota(uma_coach, chair_class):
    """EKOTA EXPRESS, Dhaka -> Panchagarh, 705 / 706"""
    return Train(
        name="EKOTA EXPRESS",
        number="705",
        reverse_number="706",
        origin=DHAKA,
        destination=PANCHAGARH,
        intermediate=[JOYDEBPUR, NATORE],
        classes=[TrainClassGroup(travel_class=chair_class, coaches=[TrainCoach(coach=uma_coach, position=1)])],
    )


@pytest.fixture
def unnumbered_train():
    """Train whose numbers never collide with the parity tests"""
    return Train(name="LOCAL", number="101", origin=DHAKA, destination=PANCHAGARH)


@pytest.fixture
def catalog_path():
    return str(DEFAULT_CATALOG_PATH)


@pytest.fixture
def catalog(catalog_path):
    import asyncio

    service = CatalogService()
    asyncio.run(service.load_catalog(path=catalog_path))
    return service
