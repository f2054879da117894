"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Error classification and JSON error responses
- Logging configuration
"""
