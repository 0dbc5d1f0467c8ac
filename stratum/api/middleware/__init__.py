"""Middleware and exception handlers shared by every endpoint.

Registration order in ``create_app`` (outermost first):

1. ``SecurityHeadersMiddleware``
2. ``RequestContextMiddleware``: correlation ID
3. ``RequestLoggingMiddleware``: request ID, timing

Exception handlers in ``error_handler`` turn every failure into an
``ErrorResponse``.
"""
