"""Base schema configuration for all Pydantic models.

All API and downstream schemas inherit from one of the public classes here:
    - APIRequest: incoming API request bodies and query models
    - APIResponse: outgoing API response bodies
    - DownstreamRequest: requests sent to the ingredients catalog
    - DownstreamResponse: responses received from the ingredients catalog
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _BaseSchema(BaseModel):
    """Private base schema with common configuration."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,  # Accept both snake_case and camelCase
        use_enum_values=True,
        validate_default=True,
        validate_assignment=True,
        serialize_by_alias=True,
    )


class APIRequest(_BaseSchema):
    """Incoming payloads; unknown properties are ignored."""

    model_config = ConfigDict(extra="ignore")


class APIResponse(_BaseSchema):
    """Outgoing payloads; only declared properties are returned."""

    model_config = ConfigDict(extra="forbid")


class DownstreamRequest(_BaseSchema):
    """Payloads we send to external services; only declared properties go out."""

    model_config = ConfigDict(extra="forbid")


class DownstreamResponse(_BaseSchema):
    """Payloads from external services; new upstream properties are ignored."""

    model_config = ConfigDict(extra="ignore")
