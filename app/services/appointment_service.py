# app/services/appointment_service.py
import logging

from sqlmodel import Session, SQLModel

from app.core.email_client import send_email
from app.core.email_templates import appointment_email
from app.models.showcase import Appointment
from app.models.user import User
from app.services.resource_service import OwnedResourceService

logger = logging.getLogger(__name__)


class AppointmentService(OwnedResourceService[Appointment]):
    """
    Appointments plus an email notification to the card owner.

    The notification runs after the row is committed; a mail failure is
    logged and never rolls the appointment back.
    """

    def create(self, session: Session, owner: User, payload: SQLModel, blob=None) -> Appointment:
        appointment = super().create(session, owner, payload, blob=blob)
        self._notify_owner(session, appointment)
        return appointment

    def _notify_owner(self, session: Session, appointment: Appointment) -> None:
        owner = session.get(User, appointment.user_id)
        if owner is None or not owner.email:
            return

        subject, html = appointment_email(
            owner_email=owner.email,
            client_name=appointment.client_name,
            phone=appointment.phone,
            appointment_date=appointment.appointment_date,
            notes=appointment.notes,
        )
        try:
            send_email(to_email=owner.email, subject=subject, html_body=html)
        except Exception as exc:
            logger.error(
                "Failed to send appointment notification for %s: %s",
                appointment.id,
                exc,
            )
