#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import json
import logging

from yuque.docs.connectors.yuque import YuqueConfig, YuqueRESTConnector
from yuque.docs.runtime.chunking import DEFAULT_CHUNK_SIZE
from yuque.docs.tools import DocumentTools, format_tool_catalog


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Read a Yuque document chunk by chunk")
    p.add_argument("namespace", help="Repository namespace, user/repo")
    p.add_argument("slug", help="Document slug")
    p.add_argument("--chunk-size", type=int, default=DEFAULT_CHUNK_SIZE)
    p.add_argument("--chunk-index", type=int, default=None)
    p.add_argument("--list-tools", action="store_true", help="Print the tool catalog first")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    if args.list_tools:
        print(format_tool_catalog())

    async with YuqueRESTConnector(YuqueConfig.from_env()) as connector:
        tools = DocumentTools(connector)

        info = await tools.get_doc_chunks_info(args.namespace, args.slug, args.chunk_size)
        try:
            payload = json.loads(info.text)
        except json.JSONDecodeError:
            print(info.text)
            return

        print("=" * 65)
        print(f"Document     : {payload['title']} ({payload['document_id']})")
        print(f"Total length : {payload['total_length']}")
        print(f"Chunks       : {payload['total_chunks']} x {payload['chunk_size']}")
        print("=" * 65)
        for summary in payload["estimated_chunks"]:
            print(
                f"{summary['index']:>4} | {summary['approximate_start']:>10} - "
                f"{summary['approximate_end']:<10} | {summary['title']}"
            )
        print("-" * 65)

        result = await tools.get_doc(
            args.namespace, args.slug, args.chunk_index, args.chunk_size
        )
        print(result.text[:2000])


if __name__ == "__main__":
    asyncio.run(main())
