#!/usr/bin/env python3
"""
Demo: Inventory and bind the example service configuration.

Prints the environment variables the example config reads, then binds
the current process environment onto it.

Try:
    APP_HTTP_PORT=9000 APP_REPLICAS_WEIGHT=3 python demo_service_config.py
"""

import logging

from envbind import describe_environment, inventory_to_yaml, must_load_from_environment
from envbind.examples import EXAMPLE_PREFIX, build_example_service_config


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    config = build_example_service_config(replica_count=2)

    print("=" * 80)
    print("ENVIRONMENT INVENTORY")
    print("=" * 80)
    print(inventory_to_yaml(describe_environment(config, EXAMPLE_PREFIX)))

    must_load_from_environment(config, EXAMPLE_PREFIX)

    print("=" * 80)
    print("BOUND CONFIGURATION")
    print("=" * 80)
    print(config)


if __name__ == "__main__":
    main()
