# app/routers/testimonials.py
from app.models.showcase import Testimonial
from app.repositories.owned_repo import OwnedRepository
from app.routers.resource_router import build_owned_router
from app.schemas.showcase import TestimonialCreate, TestimonialRead, TestimonialUpdate
from app.services.resource_service import OwnedResourceService

repo = OwnedRepository(Testimonial)
service = OwnedResourceService(repo, label="Testimonial")

router = build_owned_router(
    prefix="/testimonials",
    tags=["Testimonials"],
    service=service,
    read_model=TestimonialRead,
    update_model=TestimonialUpdate,
    create_model=TestimonialCreate,
)
