"""
Core utilities shared across the portfolio API.

This package hosts configuration (env vars, storage paths, limits),
logging setup and small URL helpers. Routers/services depend on these
primitives instead of reading the environment themselves.
"""
