"""Infrastructure Layer - database engine, clock and logging setup.

Invariants:
    - Infrastructure never imports domain decisions from core/ (errors excepted)
"""
