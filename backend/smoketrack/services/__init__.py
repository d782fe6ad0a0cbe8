"""Services Layer - async orchestration of core decisions against the store.

Invariants:
    - Services own all DB reads/writes; core/ decides, services apply
    - Every query is scoped by user_id
"""
