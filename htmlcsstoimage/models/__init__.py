"""
Data Models
===========

Pydantic models for the client.

Models:
- requests: Public request variants and shared rendering options
- responses: Success and error responses returned to callers
- wire: JSON shapes transmitted to the rendering service
"""
