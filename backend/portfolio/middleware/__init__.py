"""
Portfolio Backend — Middleware Package
========================================

Middleware Chain (order matters!):
    Request → [Request ID] → [Rate Limit] → [Logging] → [GZip] → [CORS] → Route

    1. Request ID first: every response, rejections included, carries one
    2. Rate Limit: reject floods before any other work
    3. Logging: method, path, status and duration with the request ID
"""
