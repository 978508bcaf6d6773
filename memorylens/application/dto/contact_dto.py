from pydantic import BaseModel, EmailStr, Field


class ContactRequest(BaseModel):
    """Contact form submission; every field is required"""
    name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    subject: str = Field(min_length=1, max_length=300)
    message: str = Field(min_length=1, max_length=5000)


class ContactResponse(BaseModel):
    title: str = "Thank You!"
    message: str = "Your message has been received. We'll get back to you as soon as possible."
