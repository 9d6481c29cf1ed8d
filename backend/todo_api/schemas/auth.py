from pydantic import BaseModel, EmailStr, Field, StrictStr

class SignupIn(BaseModel):
    email: EmailStr
    password: StrictStr = Field(min_length=6)

class LoginIn(BaseModel):
    email: EmailStr
    password: StrictStr
