"""
Shared error handling package.

Translates farming domain errors (missing farm, crop or fertilizer)
into consistent JSON API responses.
"""
