"""Infrastructure layer for data persistence.

This package provides the async database engine, session lifecycle, the
declarative base shared by every ORM model, and the generic repository the
domain repositories build on. Domain packages depend on it; it never
imports from them.
"""
