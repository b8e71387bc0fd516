"""
Data Transfer Objects (DTOs) Layer

This package contains DTOs that decouple the API layer from the database models.
DTOs never expose the database identifier; identity travels as a hypermedia link.

Structure:
- request/: DTOs for incoming API requests
- response/: DTOs for outgoing API responses
"""
