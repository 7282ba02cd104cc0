# Middleware package init
"""
To-Do List Backend — Middleware Package
=========================================

Middleware Chain (order matters):
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID: correlation ID for logs, error bodies and the response header
    2. Logging: access line with status and duration, tagged with the request ID
    3. CORS: FastAPI's CORSMiddleware (handles the browser client's preflight)
"""
