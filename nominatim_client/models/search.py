from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, model_validator


class StructuredSearch(BaseModel):
    """Address fields for a structured search; unset fields are not sent."""

    model_config = ConfigDict(frozen=True)

    amenity: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    county: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    postalcode: Optional[str] = None

    @model_validator(mode="after")
    def check_not_empty(self):
        if not self.to_params():
            raise ValueError("Structured search needs at least one field")
        return self

    def to_params(self) -> Dict[str, str]:
        return {
            key: value
            for key, value in self.model_dump(exclude_none=True).items()
            if value.strip()
        }
