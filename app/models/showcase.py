# app/models/showcase.py
"""
Card content owned by client accounts: gallery, products, services,
testimonials and appointments.
"""

from datetime import datetime

from sqlmodel import Field

from app.models.base import OwnedModel


class GalleryItem(OwnedModel, table=True):
    __tablename__ = "gallery_items"

    image_url: str = Field(description="Public URL stored in Supabase Storage")
    caption: str | None = Field(default=None, max_length=500)


class Product(OwnedModel, table=True):
    """
    Product listed on a client's card.
    """

    __tablename__ = "products"

    product_name: str = Field(max_length=200)
    product_photo: str = Field(description="Public URL stored in Supabase Storage")
    price: float = Field(ge=0)
    details: str


class Service(OwnedModel, table=True):
    __tablename__ = "services"

    title: str = Field(max_length=200)
    description: str | None = None


class Testimonial(OwnedModel, table=True):
    __tablename__ = "testimonials"

    testimonial_name: str = Field(max_length=200)
    feedback: str


class Appointment(OwnedModel, table=True):
    """
    Booking made through a client's card. The owner is notified by email.
    """

    __tablename__ = "appointments"

    client_name: str = Field(max_length=200)
    phone: str = Field(max_length=30)
    appointment_date: datetime
    notes: str | None = None
