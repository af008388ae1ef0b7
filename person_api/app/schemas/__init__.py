"""
Pydantic schema definitions for API payloads.

Schemas are separated from the store so that the wire representation
(camelCase JSON) is decoupled from the Python attribute names.
"""
