#!/usr/bin/env python3
"""
Update service options, showing how unknown options are reported.

Usage:
    export CACHEFLY_API_TOKEN="your-token"
    python update_options.py <service_id> name=value [name=value ...]

Values "true" and "false" are sent as booleans, integers as numbers and
anything else as strings.
"""

import json
import sys

from cachefly_sdk import CacheFlyClient, OptionsValidationError


def parse_value(raw: str):
    if raw.lower() in ("true", "false"):
        return raw.lower() == "true"
    try:
        return int(raw)
    except ValueError:
        return raw


def main():
    if len(sys.argv) < 3:
        sys.exit("Usage: python update_options.py <service_id> name=value [name=value ...]")
    service_id = sys.argv[1]
    options = {}
    for arg in sys.argv[2:]:
        name, _, value = arg.partition("=")
        options[name] = parse_value(value)

    with CacheFlyClient.from_env() as client:
        try:
            updated = client.service_options.update_options(service_id, options)
        except OptionsValidationError as e:
            print("Options rejected:")
            for error in e.errors:
                print(f"  {error.field}: {error.code}")
            sys.exit(1)

    print("Updated options:")
    print(json.dumps(updated, indent=2))


if __name__ == "__main__":
    main()
