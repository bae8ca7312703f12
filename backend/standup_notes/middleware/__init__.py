"""
Standup Notes Backend - Middleware Package
==========================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    - Request ID first, so the access log line carries the id
    - Logging measures the full handler duration, including error handlers
"""
