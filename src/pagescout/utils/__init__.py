# ABOUTME: Cross-cutting utilities and shared infrastructure
# ABOUTME: Supporting services: logging, polling waits, console tables

"""
Utils Layer: Shared infrastructure and cross-cutting concerns

This layer provides:
- Logging configuration and structured loggers
- The generic wait-for-condition primitive used by the browser scraper
- Rich console tables for command output
"""

from . import logging

__all__ = [
    "logging",
]
