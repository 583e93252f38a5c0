"""Per-user notification service for boards.

Stores notifications about board events, serves them back with offset
pagination and tracks their read state.
"""
