"""Telemetry and observability helpers.

This package emits deterministic stage events for slug generation runs.
"""

from .logger import RunLogger

__all__ = ["RunLogger"]
