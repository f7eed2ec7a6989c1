"""
High-level use cases for the record store.

Routers call these services instead of manipulating the repository directly.
"""
