"""Quarterly income report over synthetic department sales data."""
