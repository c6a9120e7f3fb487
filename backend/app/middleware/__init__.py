# Middleware package init
"""
Roster API - Middleware Package
===============================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (request direction):
    Request → [CORS] → [Request ID] → [Logging] → [Error Handling] → Route Handler

    1. CORS: FastAPI's CORSMiddleware (handles preflight, adds headers to
       every response including catch-all error bodies)
    2. Request ID: correlation ID for every log line of the request
    3. Logging: access log with the final status and duration
    4. Error Handling: catch-all turning stray exceptions into 400/500 JSON

    Responses travel back in reverse, so the access log sees the status
    code chosen by the error middleware.
"""
