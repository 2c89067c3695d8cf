"""File parsers for fleet snapshots."""

from pricing_engine.infrastructure.parsers.json_parser import (
    FleetSnapshot,
    JSONFleetParser,
    parse_fleet_file,
)

__all__ = [
    "FleetSnapshot",
    "JSONFleetParser",
    "parse_fleet_file",
]
