"""Infrastructure Layer: external service clients and cross-cutting concerns.

Invariants:
    - Infrastructure never decides HTTP responses for inbound requests
    - All outbound calls wrapped with retry/timeout/error mapping
"""
