"""Manual live check against the ParkenDD API.

Run from the repository root with:
  PYTHONPATH=src python scripts/parkendd_live_check.py

Optional environment variables:
  PARKENDD_BASE_URL
  PARKENDD_CITY
"""

from __future__ import annotations

import asyncio
import os
import sys

from pyparkendd import Client, color_for_percentage
from pyparkendd.const import DEFAULT_BASE_URL, DEFAULT_CITY
from pyparkendd.exceptions import PyParkEnDDError
from pyparkendd.models import ParkingLot


def _format_lot(lot: ParkingLot) -> str:
    ratio = lot.occupancy_ratio
    tier = color_for_percentage(ratio).name if ratio is not None else "-"
    free = "?" if lot.free < 0 else str(lot.free)
    return f"{lot.name} | {lot.state.value} | {free}/{lot.count} | {tier}"


async def main() -> int:
    base_url = os.getenv("PARKENDD_BASE_URL") or DEFAULT_BASE_URL
    city = os.getenv("PARKENDD_CITY") or DEFAULT_CITY

    try:
        async with Client(base_url=base_url, city=city) as client:
            metadata = await client.get_metadata()
            lots = await client.list_parking_lots()
    except PyParkEnDDError as exc:
        print(f"Error: {exc.__class__.__name__}: {exc}", file=sys.stderr)
        return 1

    print(f"API version: {metadata.api_version}")
    print(f"Cities: {', '.join(sorted(metadata.cities))}")
    print(f"Lots in {city}: {len(lots)}")
    for lot in lots:
        print(f"- {_format_lot(lot)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(asyncio.run(main()))
