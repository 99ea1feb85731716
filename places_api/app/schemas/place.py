"""
Pydantic schemas for places.

``PlaceBase`` holds the three user-editable fields.  Every field
defaults to an empty string so that an omitted field decodes to ``""``:
a create without ``name`` is reported as ``name is required`` and an
update that leaves out ``description`` clears the stored value.

``PlaceIn`` is the request body for both create and update and runs
``validate_place`` once the body has been decoded.  ``PlaceRead`` is the
response shape and adds the store-assigned ``id``.
"""

from pydantic import BaseModel, Field, model_validator

NAME_MAX_LENGTH = 100
ADDRESS_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 500


class PlaceValidationError(ValueError):
    """Raised when a place payload breaks one of the field rules.

    ``str(exc)`` is the message returned to the client.
    """


def validate_place(place: "PlaceBase") -> None:
    """Check the field rules in order and raise on the first failure."""
    if place.name == "":
        raise PlaceValidationError("name is required")
    if len(place.name) > NAME_MAX_LENGTH:
        raise PlaceValidationError(f"name cannot exceed {NAME_MAX_LENGTH} characters")
    if place.address == "":
        raise PlaceValidationError("address is required")
    if len(place.address) > ADDRESS_MAX_LENGTH:
        raise PlaceValidationError(f"address cannot exceed {ADDRESS_MAX_LENGTH} characters")
    if len(place.description) > DESCRIPTION_MAX_LENGTH:
        raise PlaceValidationError(
            f"description cannot exceed {DESCRIPTION_MAX_LENGTH} characters"
        )


class PlaceBase(BaseModel):
    name: str = Field("", examples=["Park"])
    address: str = Field("", examples=["1 Main St"])
    description: str = Field("", examples=["Quiet green space with a pond"])


class PlaceIn(PlaceBase):
    """Request body for creating or fully replacing a place."""

    @model_validator(mode="after")
    def check_fields(self) -> "PlaceIn":
        validate_place(self)
        return self


class PlaceRead(PlaceBase):
    """Place as returned by the API."""

    id: int

    model_config = {
        "from_attributes": True,
    }
