"""
Infrastructure adapters for the farming bounded context.

Each adapter implements a domain port (ABC) and connects
to the relational store through a shared SQLAlchemy engine.
"""
