"""
Data Models Module
----------------
Contains Pydantic models for the records returned by the Nominatim API.
Defines the structure of places, addresses and server status.
"""
