"""
Conversion bounded context, domain layer.

- Offset parsing (fixed UTC offsets only)
- Input parsing (Unix epoch values and calendar strings)
- Output formatting (utc, readable, iso8601, unix)
- Error and locale catalogs
"""
