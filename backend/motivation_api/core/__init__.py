"""Core Layer: pure domain logic, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - Payload building and response parsing are pure and deterministic
"""
