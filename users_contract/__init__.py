"""
Users API Contract Testing Suite

Ordered CRUD contract checks for a remote Users REST resource:
status codes, entity payloads and validation error shapes.
"""

__version__ = "1.0.0"
