"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that conversion failures
are consistently translated into API responses.
"""
