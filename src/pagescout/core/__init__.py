# ABOUTME: Domain models and run orchestration for both scrapers
# ABOUTME: Pipeline glue: session/transport → extractor → sink

"""
Core Layer: Domain models and workflow orchestration

This layer handles:
- The ProblemOfDayRecord domain model
- Services that wire a session or HTTP client to an extractor and a sink

Data Flow: Transport → Extraction → Output
"""

from .models import ProblemOfDayRecord

# Import services on-demand to avoid circular imports
# Use: from pagescout.core.service import ProblemOfDayService, WikiLinksService

__all__ = [
    "ProblemOfDayRecord",
]
