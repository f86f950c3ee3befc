"""Concurrency: asyncio coroutines and threading primitives."""

from . import async_await, table_sync, threads

__all__ = ["async_await", "table_sync", "threads"]
