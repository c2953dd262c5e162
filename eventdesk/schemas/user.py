"""
Pydantic schemas for user-related responses.
"""

from pydantic import BaseModel

from eventdesk.models.user import Role


class UserResponse(BaseModel):
    id: int
    name: str
    role: Role

    model_config = {"from_attributes": True}
