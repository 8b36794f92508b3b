#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from zerog.da import DAClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Disperse a tiny blob, wait for it, read it back")
    p.add_argument("--endpoint", default="http://0.0.0.0:51001")
    p.add_argument("--timeout", type=float, default=None, help="finalization timeout (s)")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    client = DAClient(args.endpoint)
    if args.timeout is not None:
        client = client.with_timeout(args.timeout)

    data = bytes([1, 4])
    async with client:
        print("uploading blob")
        header = await client.submit_and_wait(data)
        print(f"blob stored: root=0x{header.storage_root.hex()} epoch={header.epoch} quorum={header.quorum_id}")

        print("retrieving blob")
        retrieved = await client.retrieve(header.storage_root, header.epoch, header.quorum_id)
        print(f"retrieved {len(retrieved)} bytes, match={retrieved == data}")


if __name__ == "__main__":
    asyncio.run(main())
