# ABOUTME: pagescout - small scrapers for the LeetCode problem of the day and Wikipedia links
# ABOUTME: Exposes the package version; the CLI lives in pagescout.main

__version__ = "0.1.0"
