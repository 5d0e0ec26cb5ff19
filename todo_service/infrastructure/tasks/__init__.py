"""
Infrastructure adapters for the tasks bounded context.

Each adapter implements a domain port (ABC). The only storage
backend today is the in-memory task store.
"""
