#!/usr/bin/env python3
"""Live address widget walkthrough against the place directory.

Types an address keystroke by keystroke (like a user would), prints the
suggestion list once it settles, picks one candidate and prints the
resolved address record. Optionally stores it as a property.

Configuration comes from the environment (see ``PlacesConfig.from_env``):
- PLACES_API_KEY (required unless --offline)
- PROPERTY_STORE_URL / PROPERTY_STORE_COOKIE (only with --store)
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pyplaces import (  # noqa: E402
    AddressAutocomplete,
    AddressRecord,
    ListSnapshot,
    PlacesConfig,
    PlacesError,
    PropertyDraft,
    PropertyParams,
    PropertyStoreClient,
)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("address", help="Text to type into the widget, e.g. 'Dlouhá 5'")
    parser.add_argument("--pick", type=int, default=0, help="Index of the candidate to select (default: 0)")
    parser.add_argument("--keystroke-delay", type=float, default=0.08, help="Seconds between keystrokes")
    parser.add_argument("--offline", action="store_true", help="Run with disable_network set")
    parser.add_argument("--store", action="store_true", help="Submit the result to the property store")
    parser.add_argument("--layout", default="2+kk", help="Layout stored with --store")
    parser.add_argument("--area", type=float, default=50.0, help="Area in m² stored with --store")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable DEBUG logging")
    return parser.parse_args(argv)


def _print_snapshot(snapshot: ListSnapshot) -> None:
    state = "loading" if snapshot.is_loading else ("open" if snapshot.is_open else "closed")
    print(f"[list seq={snapshot.active_sequence} {state}]")
    for index, candidate in enumerate(snapshot.candidates):
        print(f"  {index}: {candidate.description}")


async def _run(args: argparse.Namespace) -> int:
    config = PlacesConfig.from_env(**({"disable_network": True} if args.offline else {}))
    draft = PropertyDraft(PropertyParams(layout=args.layout, area_sqm=args.area))

    def intake(record: AddressRecord) -> None:
        draft.accept(record)
        print(json.dumps(record.model_dump(mode="json"), ensure_ascii=False, indent=2))

    try:
        widget = AddressAutocomplete(config, on_place_selected=intake, on_state_change=_print_snapshot)
    except PlacesError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    async with widget:
        typed = ""
        for char in args.address:
            typed += char
            widget.on_input(typed)
            await asyncio.sleep(args.keystroke_delay)
        await asyncio.sleep(config.debounce_delay + 0.05)
        await widget.wait_idle()

        if not config.disable_network:
            candidates = widget.snapshot.candidates
            if not candidates:
                print("no suggestions", file=sys.stderr)
                return 1
            if not 0 <= args.pick < len(candidates):
                print(f"--pick must be between 0 and {len(candidates) - 1}", file=sys.stderr)
                return 2
            await widget.select(candidates[args.pick])

    if args.store:
        async with PropertyStoreClient(config) as store:
            saved = await store.submit_draft(draft)
            print(f"stored property {saved.id}")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    return asyncio.run(_run(args))


if __name__ == "__main__":
    raise SystemExit(main())
