"""
Query Schemas
=============

Pydantic schema bundling the filter and order specifiers of a record query.
"""

from typing import Any, Optional, Sequence

from pydantic import BaseModel, Field, field_validator

from recordkit.utils.records import reduce_records


class RecordQuery(BaseModel):
    """Filters and ordering to apply to a list of records."""

    filters: dict[str, Any] = Field(
        default_factory=dict,
        description="Field name to expected value, or list of accepted values",
    )
    order: Optional[str] = Field(
        None,
        description="Field to sort by, prefixed with '-' for descending order",
        examples=["-last_modified"],
    )

    @field_validator("order")
    @classmethod
    def validate_order(cls, v: Optional[str]) -> Optional[str]:
        """Reject an order made of the direction marker alone."""
        if v == "-":
            raise ValueError("Order must name a field")
        return v or None

    def apply(self, records: Sequence[dict]) -> list:
        """Filter then sort ``records``."""
        return reduce_records(self.filters, self.order, records)
