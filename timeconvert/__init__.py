"""
Time Convert: Unix timestamp and calendar date conversion API.

Application package root. A small service using hexagonal
architecture (ports & adapters) around a single conversion engine.

Bounded contexts:
    - conversion: Input parsing, UTC offsets, output formatting, error catalog.

Layers:
    - domain: Pure conversion logic, value objects, catalogs, error codes.
    - application: The conversion use case, DTOs, orchestration.
    - infrastructure: Catalog loading from JSON resources.
    - interfaces: FastAPI routers, Pydantic schemas, static docs page.
    - shared: Cross-cutting concerns (errors, security headers, logging).
"""
