"""Seat map arrangement

Each orientation is drawn as its own band, back facing band first. A row
holds two blocks of ``seats_per_block`` seats separated by the aisle.
"""

from typing import List, Sequence

from ..models.seat import ClassifiedSeats, SeatBand, SeatGrid, SeatRow

BACK_FACING = "back_facing"
FRONT_FACING = "front_facing"


def _band(orientation: str, seats: Sequence[int], seats_per_block: int) -> SeatBand:
    ordered = sorted(seats)
    row_width = seats_per_block * 2
    rows: List[SeatRow] = []
    for start in range(0, len(ordered), row_width):
        chunk = ordered[start:start + row_width]
        rows.append(SeatRow(
            row=len(rows) + 1,
            left=chunk[:seats_per_block],
            right=chunk[seats_per_block:],
        ))
    return SeatBand(orientation=orientation, seats=ordered, rows=rows)


def render_layout(front: Sequence[int], back: Sequence[int], seats_per_block: int = 5) -> SeatGrid:
    if seats_per_block < 1:
        raise ValueError(f"seats_per_block must be positive, got {seats_per_block}")
    bands = []
    if back:
        bands.append(_band(BACK_FACING, back, seats_per_block))
    if front:
        bands.append(_band(FRONT_FACING, front, seats_per_block))
    return SeatGrid(seats_per_block=seats_per_block, bands=bands)


def render_seats(seats: ClassifiedSeats, seats_per_block: int = 5) -> SeatGrid:
    return render_layout(seats.front, seats.back, seats_per_block)
