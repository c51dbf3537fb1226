"""
Recycling Center Finder — Interactive CLI
=========================================
Thin wrapper around the recyclefinder library.

Usage:
    recyclefinder                          # interactive mode
    recyclefinder "Springfield, IL"        # single lookup, any material
    recyclefinder "Springfield, IL" Glass  # single lookup, one material
    recyclefinder -v ...                   # debug logging

Service settings are read from environment variables:
    RECYCLEFINDER_USER_AGENT     User-Agent sent to OpenStreetMap services
    RECYCLEFINDER_NOMINATIM_URL  Nominatim search endpoint
    RECYCLEFINDER_OVERPASS_URL   Overpass interpreter endpoint
    RECYCLEFINDER_TIMEOUT        Request timeout in seconds

If not set, the public OpenStreetMap endpoints are used.
"""

import asyncio
import logging
import os
import sys

from recyclefinder import RecyclingFinder, materials
from recyclefinder._http import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from recyclefinder.exceptions import (
    CenterLookupFailure,
    GeocodingFailure,
    RecycleFinderError,
)
from recyclefinder.geocoder import NOMINATIM_SEARCH_URL
from recyclefinder.models import SearchResult
from recyclefinder.overpass import OVERPASS_INTERPRETER_URL

_BANNER = """\
╔══════════════════════════════════════╗
║       Recycling Center Finder        ║
║    Place + Material → Centers        ║
╚══════════════════════════════════════╝
Type 'q' to quit.
"""

_QUIT = ("q", "quit", "exit")


def _finder_from_env() -> RecyclingFinder:
    """Build a RecyclingFinder from RECYCLEFINDER_* environment variables."""
    raw_timeout = os.environ.get("RECYCLEFINDER_TIMEOUT", str(DEFAULT_TIMEOUT))
    try:
        timeout = float(raw_timeout)
    except ValueError:
        raise SystemExit(
            f"Error: RECYCLEFINDER_TIMEOUT is not a number: {raw_timeout!r}"
        ) from None
    return RecyclingFinder(
        user_agent=os.environ.get("RECYCLEFINDER_USER_AGENT", DEFAULT_USER_AGENT),
        timeout=timeout,
        nominatim_url=os.environ.get("RECYCLEFINDER_NOMINATIM_URL", NOMINATIM_SEARCH_URL),
        overpass_url=os.environ.get("RECYCLEFINDER_OVERPASS_URL", OVERPASS_INTERPRETER_URL),
    )


def _print_result(result: SearchResult) -> None:
    print(f"  ✓ {result.location.display_name}")
    if not result.centers:
        print("  No recycling centers found in this area.")
        return
    print()
    for center in result.centers:
        print(f"  {center.distance_km:>6.1f} km  {center.name}")
        print(f"             {center.address}")
        if center.materials:
            print(f"             Accepts: {', '.join(center.materials)}")
        if center.hours:
            print(f"             Hours:   {center.hours}")
        if center.phone:
            print(f"             Phone:   {center.phone}")


async def _run_interactive(finder: RecyclingFinder) -> None:
    print(_BANNER)
    print(f"Materials: {', '.join(materials.categories())} (blank for any)")

    while True:
        # -- Place ------------------------------------------------------
        try:
            place = (await asyncio.to_thread(input, "\nLocation:  ")).strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            break

        if place.lower() in _QUIT:
            print("Bye!")
            break
        if not place:
            print("  ✗ Location is required.")
            continue

        # -- Material ---------------------------------------------------
        try:
            material = (
                await asyncio.to_thread(input, "Material:  ")
            ).strip() or materials.ANY_MATERIAL
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            break

        # -- Lookup -----------------------------------------------------
        print("  ⏳ Searching OpenStreetMap …", end="", flush=True)
        try:
            result = await finder.search(place, material)
        except RecycleFinderError as exc:
            print(f"\r  ✗ Search failed, try again later: {exc}")
            continue

        print("\r", end="")
        if not result.found:
            print(f"  ✗ Location not found: '{place}'")
            continue
        _print_result(result)


async def _run_once(finder: RecyclingFinder, place: str, material: str) -> int:
    try:
        result = await finder.search(place, material)
    except GeocodingFailure as exc:
        print(f"Geocoding failed: {exc}", file=sys.stderr)
        return 2
    except CenterLookupFailure as exc:
        print(f"Center search failed: {exc}", file=sys.stderr)
        return 2
    if not result.found:
        print(f"Location not found: {place}", file=sys.stderr)
        return 1
    _print_result(result)
    return 0


async def _main(args: list[str]) -> int:
    async with _finder_from_env() as finder:
        if args:
            material = args[1] if len(args) > 1 else materials.ANY_MATERIAL
            return await _run_once(finder, args[0], material)
        await _run_interactive(finder)
        return 0


def main() -> None:
    """Entry point: supports both CLI args and interactive mode."""
    args = sys.argv[1:]
    verbose = any(a in ("-v", "--verbose") for a in args)
    args = [a for a in args if a not in ("-v", "--verbose")]
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if len(args) > 2:
        print(__doc__, file=sys.stderr)
        sys.exit(2)
    sys.exit(asyncio.run(_main(args)))


if __name__ == "__main__":
    main()
