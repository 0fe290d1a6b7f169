# app/routers/appointments.py
from app.models.showcase import Appointment
from app.repositories.owned_repo import OwnedRepository
from app.routers.resource_router import build_owned_router
from app.schemas.showcase import AppointmentCreate, AppointmentRead, AppointmentUpdate
from app.services.appointment_service import AppointmentService

# Bookings are listed by date, soonest first
repo = OwnedRepository(Appointment, order_by=Appointment.appointment_date.asc())
service = AppointmentService(repo, label="Appointment")

# Appointments carry client contact details, so there is no public listing.
router = build_owned_router(
    prefix="/appointments",
    tags=["Appointments"],
    service=service,
    read_model=AppointmentRead,
    update_model=AppointmentUpdate,
    create_model=AppointmentCreate,
    public=False,
)
