#!/usr/bin/env python3
"""Build the configured DataManager and query it from the command line."""

import argparse
import json
import sys
from typing import Any

import pandas as pd

from mvvmd.core.container import Container, set_container
from mvvmd.core.config import Config
from mvvmd.core.data_manager import DataManager, create_data_manager
from mvvmd.core.errors import DataManagerConstructionError
from mvvmd.sources.registry import get_registry

# Import sources to register them
import mvvmd.sources.rest
import mvvmd.sources.sql


def build_manager(container: Container) -> DataManager:
    """Create the manager variant and data sources named in configuration."""
    config = container.get_config()
    manager_config = config.get_manager_config()
    registry = get_registry()

    source_ids = manager_config.get('data_sources')
    if source_ids:
        descriptors = registry.get_descriptors(source_ids)
    else:
        descriptors = registry.get_enabled_descriptors(config)

    return create_data_manager(
        manager_config.get('name', 'default'),
        descriptors,
        instance_store=container.get_instance_store(),
    )


def list_sources(manager: DataManager) -> None:
    """List all data sources held by the manager."""
    print("\nData Sources:")
    print("-" * 50)

    for data_source_id in manager.data_source_ids:
        source = manager.get_data_source(data_source_id)
        desc = getattr(source, 'description', '')
        print(f"  {data_source_id}: {desc}")
        print(f"    State: {source.state.value}")
        if source.params:
            print(f"    Params: {source.params}")
        print()


def parse_params(pairs: list[str]) -> dict[str, str]:
    """Turn KEY=VALUE strings into a dict."""
    params = {}
    for pair in pairs:
        key, sep, value = pair.partition('=')
        if not sep or not key:
            raise ValueError(f"Invalid parameter '{pair}', expected KEY=VALUE")
        params[key] = value
    return params


def format_result(result: Any) -> str:
    if isinstance(result, pd.DataFrame):
        return result.to_string(index=False)
    return json.dumps(result, indent=2, default=str)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Inspect and query data sources through a DataManager"
    )
    parser.add_argument(
        '--config', '-c',
        help="Path to configuration file"
    )
    parser.add_argument(
        '--list', '-l',
        action='store_true',
        help="List data sources"
    )
    parser.add_argument(
        '--fetch', '-f',
        metavar='SOURCE.SERVICE',
        help="Create a data access object and fetch through it"
    )
    parser.add_argument(
        '--param', '-p',
        action='append',
        default=[],
        metavar='KEY=VALUE',
        help="Parameter bound to the data access object (repeatable)"
    )

    args = parser.parse_args(argv)

    try:
        params = parse_params(args.param)
    except ValueError as e:
        parser.error(str(e))

    # Initialize container
    config = Config(args.config) if args.config else Config()
    container = Container(config)
    set_container(container)

    try:
        manager = build_manager(container)
    except KeyError as e:
        print(f"Error: {e}")
        print(f"Available sources: {list(get_registry().get_all().keys())}")
        return 1
    except DataManagerConstructionError as e:
        print(f"Error: {e}")
        return 1

    try:
        if args.list or not args.fetch:
            list_sources(manager)
            return 0

        dao = manager.create_data_access_object(args.fetch, params)
        if dao is None:
            print(f"Error: no data access object for '{args.fetch}'")
            print(f"Available sources: {list(manager.data_source_ids)}")
            return 1

        print(format_result(dao.fetch()))
        return 0
    finally:
        manager.close()


if __name__ == "__main__":
    sys.exit(main())
