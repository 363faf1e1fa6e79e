"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Domain error to HTTP mapping
- Security headers middleware and rate limiting
- Logging configuration
"""
