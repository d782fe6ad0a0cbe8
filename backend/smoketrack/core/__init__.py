"""Core Layer - pure domain logic: no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Functions take the current instant as an argument instead of reading a clock
"""
