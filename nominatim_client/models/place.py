from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

# OSM element types as returned by Nominatim, mapped to lookup id prefixes
OSM_TYPE_PREFIXES = {
    "node": "N",
    "way": "W",
    "relation": "R",
}


class Address(BaseModel):
    """Address breakdown returned with addressdetails=1.

    Nominatim only sends the components it knows about, and the set varies by
    country, so unknown components are kept as extra fields.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    house_number: Optional[str] = None
    road: Optional[str] = None
    neighbourhood: Optional[str] = None
    suburb: Optional[str] = None
    city: Optional[str] = None
    town: Optional[str] = None
    village: Optional[str] = None
    county: Optional[str] = None
    state_district: Optional[str] = None
    state: Optional[str] = None
    iso3166_2_lvl4: Optional[str] = Field(default=None, alias="ISO3166-2-lvl4")
    postcode: Optional[str] = None
    country: Optional[str] = None
    country_code: Optional[str] = None


class ExtraTags(BaseModel):
    """Extra OSM tags returned with extratags=1."""

    model_config = ConfigDict(frozen=True, extra="allow")

    capital: Optional[str] = None
    website: Optional[str] = None
    wikidata: Optional[str] = None
    wikipedia: Optional[str] = None
    population: Optional[str] = None


class Place(BaseModel):
    """A location returned by the Nominatim server."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    place_id: int = 0
    licence: str = ""
    osm_type: Optional[str] = None
    osm_id: Optional[int] = None
    boundingbox: List[str] = Field(default_factory=list)
    lat: str = ""
    lon: str = ""
    display_name: str = ""
    class_: Optional[str] = Field(default=None, alias="class")
    type: Optional[str] = None
    category: Optional[str] = None
    addresstype: Optional[str] = None
    name: Optional[str] = None
    place_rank: Optional[int] = None
    importance: Optional[float] = None
    icon: Optional[str] = None
    address: Optional[Address] = None
    extratags: Optional[ExtraTags] = None

    @property
    def latitude(self) -> float:
        return float(self.lat)

    @property
    def longitude(self) -> float:
        return float(self.lon)

    @property
    def bounding_box(self) -> Optional[Tuple[float, float, float, float]]:
        """Return (south, north, west, east), or None if missing or malformed."""
        if len(self.boundingbox) != 4:
            return None
        try:
            south, north, west, east = (float(v) for v in self.boundingbox)
        except ValueError:
            return None
        return south, north, west, east

    @property
    def osm_reference(self) -> Optional[str]:
        """Return the id in lookup format, e.g. 'R146656'."""
        prefix = OSM_TYPE_PREFIXES.get((self.osm_type or "").lower())
        if prefix is None or self.osm_id is None:
            return None
        return f"{prefix}{self.osm_id}"
