"""Stratum - layered API schema conventions as a working FastAPI service.

Stratum is the reference implementation of a small set of conventions for
HTTP APIs built with FastAPI and Pydantic: how request and response schemas
are named and layered, how validation is split between schemas, services and
persistence, and how every response is wrapped in a predictable envelope.

Architecture Overview:
- **API Layer**: routers, middleware, and the schema toolkit
  (Base/Create/Update/Response/Delete/Error schemas and envelopes)
- **Core Layer**: configuration, logging, tracing, and the error taxonomy
- **Domain Layer**: ORM models, repositories, and services enforcing
  business rules for the reference resources (users and items)
- **Infrastructure Layer**: async database engine, sessions, and the
  generic repository

A request travels schema -> service -> repository, and any layer that
rejects it does so through the same error envelope.
"""
