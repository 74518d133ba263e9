"""Sample Nominatim response bodies and a response builder shared by the tests."""
import json

import requests

STATUE_OF_LIBERTY_NAME = (
    "Statue of Liberty, Flagpole Plaza, Manhattan Community Board 1, Manhattan, "
    "New York County, City of New York, New York, 10004, United States"
)

STATUE_OF_LIBERTY = {
    "place_id": 318223487,
    "licence": "Data © OpenStreetMap contributors, ODbL 1.0. http://osm.org/copyright",
    "osm_type": "way",
    "osm_id": 32965412,
    "lat": "40.689253199999996",
    "lon": "-74.04454817144321",
    "class": "tourism",
    "type": "attraction",
    "place_rank": 30,
    "importance": 0.6939842454084,
    "addresstype": "tourism",
    "name": "Statue of Liberty",
    "display_name": STATUE_OF_LIBERTY_NAME,
    "address": {
        "tourism": "Statue of Liberty",
        "road": "Flagpole Plaza",
        "neighbourhood": "Manhattan Community Board 1",
        "suburb": "Manhattan",
        "county": "New York County",
        "city": "City of New York",
        "state": "New York",
        "ISO3166-2-lvl4": "US-NY",
        "postcode": "10004",
        "country": "United States",
        "country_code": "us",
    },
    "extratags": {
        "wikidata": "Q9202",
        "wikipedia": "en:Statue of Liberty",
        "heritage": "2",
    },
    "boundingbox": ["40.6888049", "40.6896741", "-74.0451069", "-74.0439637"],
}

FRANCE = {
    "place_id": 108451,
    "licence": "Data © OpenStreetMap contributors, ODbL 1.0. http://osm.org/copyright",
    "osm_type": "relation",
    "osm_id": 2202162,
    "lat": "46.603354",
    "lon": "1.8883335",
    "class": "boundary",
    "type": "administrative",
    "display_name": "France",
    "address": {"country": "France", "country_code": "fr"},
    "extratags": {"capital": "Paris", "population": "66991000"},
    "boundingbox": ["-50.2187169", "51.3055721", "-178.3873749", "172.3057152"],
}

LOOKUP_RELATION = {
    "place_id": 298131768,
    "osm_type": "relation",
    "osm_id": 146656,
    "lat": "53.4794892",
    "lon": "-2.2451148",
    "class": "boundary",
    "type": "administrative",
    "display_name": "Manchester, Greater Manchester, England, United Kingdom",
    "boundingbox": ["53.3400500", "53.5445923", "-2.3199185", "-2.1468288"],
}

LOOKUP_WAY = {
    "place_id": 111349440,
    "osm_type": "way",
    "osm_id": 50637691,
    "lat": "52.39456",
    "lon": "13.5345965",
    "class": "leisure",
    "type": "park",
    "display_name": "Britzer Garten, Mariendorfer Weg, Britz, Neukölln, Berlin, 12347, Deutschland",
    "boundingbox": ["52.3908807", "52.3978845", "-13.5273093", "13.5423357"],
}

STATUS_OK = {
    "status": 0,
    "message": "OK",
    "data_updated": "2024-02-13T10:52:03+00:00",
    "software_version": "4.4.0-0",
    "database_version": "4.4.0-0",
}


def make_response(body, status_code=200, url="https://nominatim.openstreetmap.org/"):
    """Build a real requests.Response carrying a JSON (or raw text) body."""
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    if isinstance(body, str):
        response._content = body.encode("utf-8")
    else:
        response._content = json.dumps(body).encode("utf-8")
    response.headers["Content-Type"] = "application/json"
    response.encoding = "utf-8"
    return response


