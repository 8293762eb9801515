"""Pydantic Schemas: response contracts for API endpoints.

Invariants:
    - Schemas describe the JSON shapes sent to the browser client
"""
