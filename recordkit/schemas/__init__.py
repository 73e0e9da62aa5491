"""
Schemas Module
==============

Pydantic schemas for record queries.
"""

from recordkit.schemas.query import RecordQuery

__all__ = ["RecordQuery"]
