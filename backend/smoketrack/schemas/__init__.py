"""Pydantic Schemas - request/response contracts for API endpoints.

Invariants:
    - Schemas validate at the system boundary (user input, API responses)
    - Field names follow the public API (last_smoke_time, unlock_time, ...)
"""
