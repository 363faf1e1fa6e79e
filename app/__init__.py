"""
Agrix: farm, crop and fertilizer management service.

Application package root. This is a modular monolith using
hexagonal architecture (ports & adapters) with domain-driven design.

Bounded contexts:
    - farming: Farms, crops, fertilizers and their associations.

Layers:
    - domain: Entities, change sets, ports (ABCs), errors, domain services.
    - application: Use cases spanning several domain services, DTOs.
    - infrastructure: SQLAlchemy adapters implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas, dependency wiring.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
