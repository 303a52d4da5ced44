from pydantic import BaseModel

# Presence is checked by the account service so missing fields
# get the same 400 "Missing fields" answer as empty ones.


class UserRegister(BaseModel):
    name: str | None = None
    email: str | None = None
    password: str | None = None


class LoginRequest(BaseModel):
    email: str | None = None
    password: str | None = None


def user_document(name: str, email: str, password_hash: str) -> dict:
    return {"name": name, "email": email, "passwordHash": password_hash}
