from pydantic import BaseModel, computed_field


class UserResponse(BaseModel):
    """Signed-in user as shown in the header and returned by /auth/me"""
    id: str
    full_name: str
    email: str

    @computed_field
    @property
    def first_name(self) -> str:
        return self.full_name.split()[0] if self.full_name.split() else ""
