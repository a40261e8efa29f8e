#!/usr/bin/env python3
"""
Print the account the configured API token belongs to.

Usage:
    export CACHEFLY_API_TOKEN="your-token"
    python get_account.py
"""

import json
import sys

from cachefly_sdk import CacheFlyClient, CacheFlyError, ConfigurationError


def main():
    try:
        client = CacheFlyClient.from_env()
    except ConfigurationError as e:
        sys.exit(f"Error: {e}")

    with client:
        try:
            account = client.accounts.get_current()
        except CacheFlyError as e:
            sys.exit(f"Failed to get account: {e}")

    print("Current account:")
    print(json.dumps(account.model_dump(mode="json", by_alias=True), indent=2))


if __name__ == "__main__":
    main()
