# app/routers/services.py
from app.models.showcase import Service
from app.repositories.owned_repo import OwnedRepository
from app.routers.resource_router import build_owned_router
from app.schemas.showcase import ServiceCreate, ServiceRead, ServiceUpdate
from app.services.resource_service import OwnedResourceService

repo = OwnedRepository(Service)
service = OwnedResourceService(repo, label="Service")

router = build_owned_router(
    prefix="/services",
    tags=["Services"],
    service=service,
    read_model=ServiceRead,
    update_model=ServiceUpdate,
    create_model=ServiceCreate,
)
