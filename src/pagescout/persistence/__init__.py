# ABOUTME: Output sinks for scraper results
# ABOUTME: The problem-of-the-day TOML file writer

from .potd_file import render_potd_document, require_existing_path, write_potd_file

__all__ = [
    "render_potd_document",
    "require_existing_path",
    "write_potd_file",
]
