#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from zerog.da import DAClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Disperse a blob larger than one chunk")
    p.add_argument("--endpoint", default="http://0.0.0.0:51001")
    p.add_argument("--size", type=int, default=1024 * 1024 * 32, help="blob size in bytes")
    p.add_argument("--concurrency", type=int, default=1, help="chunks in flight at once")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    data = bytes(i % 256 for i in range(args.size))

    async with DAClient(args.endpoint).with_concurrency(args.concurrency) as client:
        print("uploading blob")
        headers = await client.split_and_submit_and_wait(data)
        print("=" * 92)
        print(f"{'Chunk':>5} | {'Storage root':66} | {'Epoch':>6} | {'Quorum':>6}")
        print("-" * 92)
        for i, h in enumerate(headers):
            print(f"{i:>5} | 0x{h.storage_root.hex():64} | {h.epoch:>6} | {h.quorum_id:>6}")
        print("=" * 92)


if __name__ == "__main__":
    asyncio.run(main())
