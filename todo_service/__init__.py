"""
Todo Service: a layered CRUD web service for todo tasks.

Application package root. This is a small modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - tasks: Creating, reading, updating and deleting todo tasks.

Layers:
    - domain: Entities, ports (ABCs), errors and the task service.
    - application: Controller, DTOs and controller-facing errors.
    - infrastructure: Adapters implementing domain ports (in-memory store).
    - interfaces: FastAPI routers, Pydantic schemas, dependency wiring.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
