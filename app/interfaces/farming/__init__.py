"""
HTTP interface for the farming bounded context.

Routers for farms, crops and fertilizers, their Pydantic schemas,
and the dependency wiring that builds services per request.
"""
