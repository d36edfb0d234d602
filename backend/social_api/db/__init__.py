"""Database Metadata: declarative base shared by ORM models and migrations."""
