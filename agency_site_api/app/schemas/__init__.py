"""
Pydantic schema definitions for API payloads.

Schemas are separated from the stored documents so that the JSON
representation (camelCase keys) can differ from the snake_case field
names used inside the service layer.
"""
