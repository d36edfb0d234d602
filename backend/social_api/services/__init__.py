"""Services Layer: AccountRules and MessageRules.

Invariants:
    - Services hold repository references only; no in-memory state between calls
    - Each operation is a single read-then-write against the store
"""
