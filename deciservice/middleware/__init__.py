# Middleware package init
"""
Deciservice — Middleware Package
==================================

Middleware Chain (order matters):
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    The request id is set before the access logger runs, so every access
    line carries it. Responses travel the chain in reverse.
"""
