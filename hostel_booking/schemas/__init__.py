"""
Pydantic schemas for the hostel booking API.

The backend exchanges camelCase JSON; every schema accepts both the
camelCase alias and the snake_case attribute name.
"""
