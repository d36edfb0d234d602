"""Core Layer: records, limits, pure validation rules and store contracts.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, models/ or db/
    - Validation functions are pure and deterministic
"""
