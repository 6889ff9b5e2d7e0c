"""
Pydantic schemas package.

Schemas describe the shape of contact data exchanged via the API.
"""
