"""
Application layer for the farming bounded context.

Use cases coordinate several domain services to fulfill one business
operation. No framework or infrastructure imports allowed.
"""
