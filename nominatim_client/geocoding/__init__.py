"""
Geocoding Module
--------------
Client for the OpenStreetMap Nominatim API: status, search, reverse and lookup.
Handles caller identification, endpoint configuration and error mapping.
"""
