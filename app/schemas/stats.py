# app/schemas/stats.py
import uuid
from datetime import datetime

from sqlmodel import SQLModel


class RecentClient(SQLModel):
    """
    Lightweight info for the last N registered clients.
    """

    id: uuid.UUID
    email: str
    created_at: datetime


class RecentProfile(SQLModel):
    """
    Lightweight info for the last N created business cards.
    """

    id: uuid.UUID
    user_id: uuid.UUID
    name: str
    owner_email: str | None
    created_at: datetime


class DashboardStats(SQLModel):
    """
    Full payload for the admin dashboard.
    """

    total_clients: int
    clients_with_profiles: int
    total_services: int
    total_products: int
    total_testimonials: int
    recent_clients: list[RecentClient]
    recent_profiles: list[RecentProfile]
