"""Core backend infrastructure for the Showcase Leaderboard backend.

Configuration, logging, database, rate limiting and dependency helpers used by
the FastAPI application entrypoint.
"""
