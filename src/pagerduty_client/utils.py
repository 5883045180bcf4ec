"""Utility functions for CLI operations."""

import asyncio


def run_async(coro):
    """Helper to run async functions synchronously in Click commands."""
    return asyncio.run(coro)
