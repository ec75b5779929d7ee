"""Out-of-band counter administration.

Usage:
    python -m viewcounter.tools.counters show --host example.com --path /post/1
    python -m viewcounter.tools.counters reset --host example.com --path /post/1
    python -m viewcounter.tools.counters reset --host example.com --path /post/1 --value 42

Writes go straight to the store, bypassing the partition actors, so do not
reset a key while the service is serving it.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from viewcounter.adapters.persistence.database import async_session_factory, engine
from viewcounter.adapters.persistence.repositories import SqlCounterStore
from viewcounter.application.ports.counter_store import CounterStore
from viewcounter.domain.errors import ViewCounterError
from viewcounter.domain.policies.resource_path import validate_single_path
from viewcounter.domain.value_objects.partition_key import PartitionKey

logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")
logger = logging.getLogger(__name__)


def _key(host: str, path: str) -> PartitionKey:
    return PartitionKey(host=host, path=validate_single_path(path))


async def show_counter(store: CounterStore, key: PartitionKey) -> int | None:
    return await store.load(str(key))


async def reset_counter(store: CounterStore, key: PartitionKey, value: int = 0) -> int:
    if value < 0:
        raise ValueError("Counter value cannot be negative")
    previous = await store.load(str(key))
    await store.store(str(key), value)
    logger.info("Reset %s: %s -> %d", key, previous if previous is not None else "absent", value)
    return value


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Inspect or reset view counters")
    sub = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (("show", "Print the stored value"), ("reset", "Overwrite the stored value")):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("--host", required=True, help="Tenant host, e.g. example.com")
        p.add_argument("--path", required=True, help="Resource path, e.g. /post/1")
        if name == "reset":
            p.add_argument(
                "--value", type=int, default=0,
                help="Value to store (default: 0)",
            )
    args = parser.parse_args(argv)

    try:
        key = _key(args.host, args.path)
    except (ValueError, ViewCounterError) as e:
        logger.error("%s", e)
        return 2

    store = SqlCounterStore(async_session_factory)

    async def run() -> None:
        try:
            if args.command == "show":
                views = await show_counter(store, key)
                print(f"{key}: {views if views is not None else 0}")
            else:
                await reset_counter(store, key, args.value)
        finally:
            await engine.dispose()

    try:
        asyncio.run(run())
    except (ValueError, ViewCounterError) as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
