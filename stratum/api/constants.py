"""API-related constants."""

# HTTP Status Codes
HTTP_500_INTERNAL_SERVER_ERROR = 500

# HTTP Headers
CORRELATION_ID_HEADER = "X-Correlation-ID"
REQUEST_ID_HEADER = "X-Request-ID"

# Routing
API_V1_PREFIX = "/api/v1"

# Envelope messages
MSG_CREATED = "{resource} created successfully"
MSG_UPDATED = "{resource} updated successfully"
MSG_DELETED = "{resource} deleted successfully"
MSG_VALIDATION_FAILED = "Request validation failed"
