#!/usr/bin/env python3
"""
Print the current options of a service.

Usage:
    export CACHEFLY_API_TOKEN="your-token"
    python get_basic_options.py <service_id>
"""

import json
import sys

from cachefly_sdk import CacheFlyClient, CacheFlyError


def main():
    if len(sys.argv) < 2:
        sys.exit("Usage: python get_basic_options.py <service_id>")
    service_id = sys.argv[1]

    with CacheFlyClient.from_env() as client:
        try:
            options = client.service_options.get_options(service_id)
        except CacheFlyError as e:
            sys.exit(f"Failed to get service options for {service_id}: {e}")

    print("Service options:")
    print(json.dumps(options, indent=2))


if __name__ == "__main__":
    main()
