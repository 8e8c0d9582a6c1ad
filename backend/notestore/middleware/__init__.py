# Middleware package init
"""
Note Store: Middleware Package
==============================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID: generate the correlation ID first so every later log line has it
    2. Logging: log method, path, status and duration once the response is known
    3. CORS: FastAPI's CORSMiddleware, answers preflight requests from any origin
"""
