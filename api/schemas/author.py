# api/schemas/author.py
from datetime import date, datetime
from typing import Optional
from pydantic import Field
from .common import CamelModel

class AuthorBase(CamelModel):
    first_name: str = Field(min_length=1, max_length=255)
    last_name: str = Field(min_length=1, max_length=255)
    bio: Optional[str] = Field(default=None, max_length=1000)
    birth_date: Optional[date] = None

class AuthorCreate(AuthorBase):
    pass

class AuthorUpdate(CamelModel):
    first_name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    last_name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    bio: Optional[str] = Field(default=None, max_length=1000)
    birth_date: Optional[date] = None

class AuthorSummary(CamelModel):
    id: int
    first_name: str
    last_name: str

class AuthorSchema(CamelModel):
    id: int
    first_name: str
    last_name: str
    bio: Optional[str] = None
    birth_date: Optional[date] = None
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None
