"""
Pydantic schema definitions for API payloads.

Schemas are kept separate from the SQL in ``services`` so that the
wire representation of a place does not depend on how it is stored.
"""
