"""
Application layer package.

Contains use cases that orchestrate several domain services.
Each use case is a single class with one public method.
This layer depends on the domain, never on infrastructure.
"""
