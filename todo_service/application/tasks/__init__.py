"""
Application layer for the tasks bounded context.

The task controller adapts domain service calls to plain DTOs and
controller errors. No framework or infrastructure imports allowed.
"""
