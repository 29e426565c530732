"""
Application layer for the conversion bounded context.

The use case validates raw request fields, drives the domain
parsers and formatter, and returns a single success or failure.
"""
