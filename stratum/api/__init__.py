"""HTTP API layer built on FastAPI.

Key components:
- **main**: Application factory and lifecycle management
- **routers**: Versioned CRUD endpoints for users and items
- **schemas**: Base/Create/Update/Response/Delete schemas, success
  envelopes and the error envelope
- **middleware**: Security headers, correlation and request IDs, request
  logging and the exception handlers that produce ``ErrorResponse``
- **utils**: orjson response class

Routes only translate between HTTP and services; business rules live in
``stratum.domain`` and HTTP status mapping lives in
``middleware.error_handler``.
"""
