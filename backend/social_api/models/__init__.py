"""ORM Models: SQLAlchemy declarative models for accounts and messages.

Invariants:
    - All models inherit from Base (db/base.py)
    - All models imported here so Base.metadata knows every table
"""

from social_api.models.account import Account  # noqa: F401
from social_api.models.message import Message  # noqa: F401
