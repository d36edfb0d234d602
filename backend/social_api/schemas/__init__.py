"""Pydantic Schemas: request/response shapes for API endpoints.

Invariants:
    - Wire names are camelCase (accountId, postedBy, messageText, timePostedEpoch)
    - Request fields are optional: the rule services, not Pydantic, decide validity
    - Responses never expose password material

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
