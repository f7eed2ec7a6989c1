"""
Core utilities shared across the record store.

Configuration (env vars, data file path, feature flags) and logging setup
live here so routers/services depend on these primitives instead of reading
the environment themselves.
"""
