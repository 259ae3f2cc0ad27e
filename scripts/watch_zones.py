#!/usr/bin/env python3
"""Headless zone/alert watcher.

Runs the sync client against a live server with the in-memory map engine
and prints the zone layer and alert list after every poll period.

Examples::

    python scripts/watch_zones.py --base-url http://localhost:8080 --duration 10
    python scripts/watch_zones.py --send "Zona Norte" "lluvia fuerte y huayco"
    python scripts/watch_zones.py --reset --duration 0
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from zonewatch import MemoryMapEngine, ZoneWatchClient, ZoneWatchConfig  # noqa: E402
from zonewatch.render import MemoryMap  # noqa: E402


def _print_state(client: ZoneWatchClient) -> None:
    handle = client.map
    if isinstance(handle, MemoryMap):
        print(f"map center={handle.center} zoom={handle.zoom}")
        for layer in handle.layers:
            for rendered in layer.features:
                props = rendered.feature.properties
                print(f"  zone {props.name!s:<20} {props.effective_status:<9} fill={rendered.style.fill_color}")
    for entry in client.page.alerts.entries:
        print(f"  [{entry.badge.value:<8}] {entry.tipo}: {entry.mensaje} ({entry.meta})")


async def _run(args: argparse.Namespace) -> int:
    overrides: dict[str, object] = {}
    if args.base_url:
        overrides["base_url"] = args.base_url
    if args.interval:
        overrides["poll_interval"] = args.interval
    config = ZoneWatchConfig.from_env(**overrides)

    async with ZoneWatchClient(config, map_engine=MemoryMapEngine()) as client:
        await client.start()
        await client.scheduler.drain()

        if args.reset:
            await client.reset()
        if args.send:
            zona, texto = args.send
            sent = await client.submit_message(zona, texto)
            print(f"message sent: {sent}")

        elapsed = 0.0
        while True:
            await client.scheduler.drain()
            print(f"--- t={elapsed:.1f}s")
            _print_state(client)
            if elapsed >= args.duration:
                break
            await asyncio.sleep(config.poll_interval)
            elapsed += config.poll_interval
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--base-url", help="Server base URL (default: ZONEWATCH_BASE_URL or http://localhost:8080)")
    parser.add_argument("--interval", type=float, help="Poll interval in seconds")
    parser.add_argument("--duration", type=float, default=9.0, help="Seconds to keep watching")
    parser.add_argument("--send", nargs=2, metavar=("ZONE", "TEXT"), help="Submit one message after startup")
    parser.add_argument("--reset", action="store_true", help="Reset zone state after startup")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        return asyncio.run(_run(args))
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
