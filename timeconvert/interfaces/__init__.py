"""
Interfaces layer package.

Contains FastAPI routers, Pydantic response schemas and the
static documentation page. No business logic belongs here.
Routes call use cases and return responses.
"""
