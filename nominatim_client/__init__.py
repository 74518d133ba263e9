"""
Nominatim Client
--------------
Bindings to the OpenStreetMap Nominatim geocoding API.
"""
from nominatim_client.errors import (
    InvalidUrl,
    NominatimError,
    NotFound,
    ParseFailed,
    RequestFailed,
    RequestTimeout,
)
from nominatim_client.geocoding.client import Client
from nominatim_client.geocoding.ident import IdentificationMethod, IdentKind
from nominatim_client.models.place import Address, ExtraTags, Place
from nominatim_client.models.search import StructuredSearch
from nominatim_client.models.status import Status

__all__ = [
    "Address",
    "Client",
    "ExtraTags",
    "IdentKind",
    "IdentificationMethod",
    "InvalidUrl",
    "NominatimError",
    "NotFound",
    "ParseFailed",
    "Place",
    "RequestFailed",
    "RequestTimeout",
    "Status",
    "StructuredSearch",
]
