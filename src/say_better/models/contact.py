"""Pydantic model for contact form submissions."""

from __future__ import annotations

from pydantic import BaseModel


class ContactMessage(BaseModel):
    name: str
    email: str
    message: str
