"""
Domain layer package.

Contains business logic: entities, change sets, domain services,
errors and port interfaces. No framework imports, no direct IO:
storage is reached only through ports.
"""
