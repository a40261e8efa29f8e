#!/usr/bin/env python3
"""
Print the legacy API key of a service, using the async client.

Usage:
    export CACHEFLY_API_TOKEN="your-token"
    python get_legacy_apikey.py <service_id>
"""

import asyncio
import sys

from cachefly_sdk import CacheFlyClient


async def main(service_id: str):
    async with CacheFlyClient.from_env() as client:
        key = await client.service_options.aget_legacy_api_key(service_id)
        print(f"Legacy API key: {key.api_key}")
    client.close()


if __name__ == "__main__":
    if len(sys.argv) < 2:
        sys.exit("Usage: python get_legacy_apikey.py <service_id>")
    asyncio.run(main(sys.argv[1]))
