"""
Currency Gateway — HTTP front for an upstream currency-exchange API.

Application package root. A small service using hexagonal
architecture (ports & adapters).

Bounded contexts:
    - conversion: Forward a single currency conversion upstream and
      translate upstream failures into client-facing errors.

Layers:
    - domain: Entities, ports (ABCs), errors, upstream error-code table.
    - application: Use case, DTOs, orchestration.
    - infrastructure: Upstream HTTP adapter implementing the domain port.
    - interfaces: FastAPI router, payload schema, content negotiation.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
