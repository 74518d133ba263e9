import logging
import re
from datetime import timedelta
from typing import Any, Dict, Iterable, List, Optional, Union

import requests
from pydantic import AnyHttpUrl, TypeAdapter, ValidationError

from nominatim_client.errors import InvalidUrl, NotFound, ParseFailed, RequestFailed, RequestTimeout
from nominatim_client.geocoding.ident import IdentificationMethod
from nominatim_client.models.place import Place
from nominatim_client.models.search import StructuredSearch
from nominatim_client.models.status import Status

# Constants
NOMINATIM_BASE_URL = "https://nominatim.openstreetmap.org/"
REQUEST_TIMEOUT = 10
OUTPUT_FORMAT = "json"
MAX_ZOOM = 18

# Always ask for the address breakdown and extra tags
DETAIL_PARAMS = {
    "addressdetails": "1",
    "extratags": "1",
}

OSM_ID_PATTERN = re.compile(r"^[NWR]\d+$")

# Get logger
logger = logging.getLogger(__name__)

_URL_ADAPTER = TypeAdapter(AnyHttpUrl)
_PLACES_ADAPTER = TypeAdapter(List[Place])

TimeoutValue = Union[float, int, timedelta, None]


def _validate_base_url(url: Any) -> str:
    try:
        parsed = _URL_ADAPTER.validate_python(str(url))
    except ValidationError as e:
        raise InvalidUrl(url) from e
    # Endpoints are appended to the path
    if parsed.query or parsed.fragment:
        raise InvalidUrl(url)
    return str(parsed)


def _to_seconds(timeout: TimeoutValue) -> Optional[float]:
    if timeout is None:
        return None
    if isinstance(timeout, timedelta):
        timeout = timeout.total_seconds()
    timeout = float(timeout)
    if timeout <= 0:
        raise ValueError(f"Timeout must be positive (or None to disable), got {timeout}")
    return timeout


class Client:
    """The interface for accessing a Nominatim API server.

    Each operation is a single GET round trip. The requests session is the
    only shared resource; configuration must not be changed while requests
    are in flight on other threads.
    """

    def __init__(
        self,
        identification: IdentificationMethod,
        base_url: Optional[str] = None,
        timeout: TimeoutValue = REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.identification = identification
        self._base_url = _validate_base_url(base_url) if base_url is not None else NOMINATIM_BASE_URL
        self._timeout = _to_seconds(timeout)
        self._owns_session = session is None
        self.session = session or requests.Session()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        if self._owns_session:
            self.session.close()

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> Optional[float]:
        return self._timeout

    def set_base_url(self, url) -> None:
        """Set the base url for all requests; the old one is kept if invalid."""
        self._base_url = _validate_base_url(url)
        logger.debug(f"Base URL set to {self._base_url}")

    def set_timeout(self, timeout: TimeoutValue) -> None:
        """Set the per-request timeout; None disables it."""
        self._timeout = _to_seconds(timeout)

    def set_identification(self, identification: IdentificationMethod) -> None:
        self.identification = identification

    def status(self) -> Status:
        """Check the status of the nominatim server.

        https://nominatim.org/release-docs/develop/api/Status/
        """
        response = self._send("status", {"format": OUTPUT_FORMAT})
        # An unhealthy server answers 500 with a status body
        if response.status_code == 500:
            try:
                status = Status.model_validate(response.json())
            except ValueError:
                self._raise_for_status(response)
        else:
            self._raise_for_status(response)
            try:
                status = Status.model_validate(self._decode(response))
            except ValidationError as e:
                logger.warning(f"Unexpected status payload from {response.url}: {e}")
                raise ParseFailed(f"Invalid status response: {e}") from e
        if not status.ok:
            logger.warning(f"Nominatim server reports status {status.status}: {status.message}")
        return status

    def search(self, query: str, limit: Optional[int] = None) -> List[Place]:
        """Get places matching a free-text query, in the server's ranking order.

        https://nominatim.org/release-docs/develop/api/Search/
        """
        params = {"q": query}
        return self._search(params, limit)

    def search_structured(self, search: StructuredSearch, limit: Optional[int] = None) -> List[Place]:
        """Get places matching a structured (field by field) address query."""
        return self._search(search.to_params(), limit)

    def reverse(self, latitude, longitude, zoom: Optional[int] = None) -> Place:
        """Get the place at a coordinate.

        Latitude and longitude are passed through as strings; the server
        validates them. Raises NotFound if nothing is there.

        https://nominatim.org/release-docs/develop/api/Reverse/
        """
        params = {
            "lat": str(latitude).replace(" ", ""),
            "lon": str(longitude).replace(" ", ""),
        }
        if zoom is not None:
            if isinstance(zoom, bool) or not isinstance(zoom, int) or not 0 <= zoom <= MAX_ZOOM:
                raise ValueError(f"Zoom must be an integer between 0 and {MAX_ZOOM}, got {zoom!r}")
            params["zoom"] = str(zoom)
        params.update(DETAIL_PARAMS)
        params["format"] = OUTPUT_FORMAT

        data = self._fetch("reverse", params)
        if isinstance(data, dict) and "error" in data:
            logger.info(f"No place found for coordinates ({params['lat']}, {params['lon']}): {data['error']}")
            raise NotFound(f"No result for coordinates ({params['lat']}, {params['lon']}): {data['error']}")
        try:
            place = Place.model_validate(data)
        except ValidationError as e:
            logger.warning(f"Unexpected reverse payload for ({params['lat']}, {params['lon']}): {e}")
            raise ParseFailed(f"Invalid reverse response: {e}") from e
        logger.info(f"Successfully geocoded coordinates ({params['lat']}, {params['lon']})")
        return place

    def lookup(self, osm_ids: Iterable[str]) -> List[Place]:
        """Get places for OSM node, way or relation ids such as 'R146656'.

        Malformed ids are skipped and ids the server cannot resolve are left
        out of the result.

        https://nominatim.org/release-docs/develop/api/Lookup/
        """
        requested = [str(osm_id).strip().upper() for osm_id in osm_ids]
        ids = [osm_id for osm_id in requested if OSM_ID_PATTERN.match(osm_id)]
        if len(ids) < len(requested):
            skipped = [osm_id for osm_id in requested if not OSM_ID_PATTERN.match(osm_id)]
            logger.warning(f"Skipping malformed OSM ids (expected N/W/R followed by digits): {skipped}")
        if not ids:
            return []

        params = {"osm_ids": ",".join(ids)}
        params.update(DETAIL_PARAMS)
        params["format"] = OUTPUT_FORMAT

        places = self._parse_places(self._fetch("lookup", params))
        if len(places) < len(ids):
            logger.info(f"Lookup resolved {len(places)} of {len(ids)} ids")
        return places

    def _search(self, params: Dict[str, str], limit: Optional[int]) -> List[Place]:
        params = dict(params)
        params.update(DETAIL_PARAMS)
        params["format"] = OUTPUT_FORMAT
        if limit is not None:
            params["limit"] = str(limit)

        places = self._parse_places(self._fetch("search", params))
        logger.info(f"Search returned {len(places)} places")
        return places

    def _parse_places(self, data: Any) -> List[Place]:
        try:
            return _PLACES_ADAPTER.validate_python(data)
        except ValidationError as e:
            logger.warning(f"Unexpected place list payload: {e}")
            raise ParseFailed(f"Invalid place list response: {e}") from e

    def _fetch(self, endpoint: str, params: Dict[str, str]) -> Any:
        response = self._send(endpoint, params)
        self._raise_for_status(response)
        return self._decode(response)

    def _send(self, endpoint: str, params: Dict[str, str]) -> requests.Response:
        url = self._base_url.rstrip("/") + "/" + endpoint
        query = dict(params)
        query.update(self.identification.params())
        headers = self.identification.headers()

        logger.debug(f"GET {url} params={params}")
        try:
            return self.session.get(url, params=query, headers=headers, timeout=self._timeout)
        except requests.exceptions.Timeout as e:
            logger.warning(f"Request to {url} timed out after {self._timeout}s")
            raise RequestTimeout(f"Request to {url} timed out: {e}", url=url) from e
        except requests.RequestException as e:
            logger.warning(f"Network error for {url}: {e}")
            raise RequestFailed(f"Request to {url} failed: {e}", url=url) from e

    def _raise_for_status(self, response: requests.Response) -> None:
        if 200 <= response.status_code < 300:
            return
        logger.warning(f"Nominatim HTTP error ({response.status_code}) for {response.url}")
        raise RequestFailed(
            f"HTTP {response.status_code} from {response.url}: {response.text[:200]}",
            url=response.url,
            status_code=response.status_code,
        )

    def _decode(self, response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            logger.warning(f"Response from {response.url} is not valid JSON: {e}")
            raise ParseFailed(f"Response from {response.url} is not valid JSON") from e
