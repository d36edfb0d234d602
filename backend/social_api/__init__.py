"""Social Media API Package: accounts and short text messages.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
