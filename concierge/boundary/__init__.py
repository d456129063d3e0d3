"""
Boundary layer for external system integrations.

Holds the relational store adapter: ORM models, CRUD operations and
connection management.
"""
