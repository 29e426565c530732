"""
Domain layer package.

Contains pure conversion logic: value objects, parsers, formatters,
catalogs and error codes. This layer has ZERO external dependencies.
No framework imports, no IO, no side effects.
"""
