"""
Infrastructure layer package.

Contains concrete implementations (adapters) of the ports
defined in the domain layer: the relational schema, engine
construction and one repository per entity.
"""
