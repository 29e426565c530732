"""JSON-backed error and locale catalogs."""
