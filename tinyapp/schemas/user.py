from pydantic import BaseModel, ConfigDict, Field


class Credentials(BaseModel):
    # Presence is checked by the user directory (400), not here (422)
    email: str = Field("", description="Account email, matched exactly")
    password: str = Field("", description="Plaintext password, hashed on arrival")


class RegisterRequest(Credentials):
    pass


class LoginRequest(Credentials):
    pass


class UserResponse(BaseModel):
    """Public view of a user; the password hash is never serialized"""
    id: str
    email: str

    model_config = ConfigDict(from_attributes=True)
