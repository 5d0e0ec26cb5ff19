"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that controller errors
are consistently translated into API responses.
"""
