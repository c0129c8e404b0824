"""Engine Layer - Core Orchestration

This module provides the core engine layer for the scraper, implementing:
- ScrapeOrchestrator: Main entry point for scrape execution
- ScrapeRequest / ScrapeOutcome: Standardized input/result format
- ScrapeState: Scrape lifecycle states
"""

from .orchestrator import (
    SAFE_SEARCH_WIRE,
    ScrapeOrchestrator,
    build_initial_params,
    map_safe_search,
)
from .result import ScrapeMetadata, ScrapeOutcome, ScrapeRequest, ScrapeState

__all__ = [
    "ScrapeOrchestrator",
    "ScrapeRequest",
    "ScrapeOutcome",
    "ScrapeMetadata",
    "ScrapeState",
    "SAFE_SEARCH_WIRE",
    "build_initial_params",
    "map_safe_search",
]
