"""Routing — build-once pattern table with first-match resolution.

Patterns are registered during startup and compiled into an immutable
lookup structure that every later ``resolve()`` call reads.
"""
