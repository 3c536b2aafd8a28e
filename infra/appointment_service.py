from typing import Any, Mapping, Tuple
from sdk.nookal_sdk import NookalApi
from core.schemas import PPMWebhookPayload, NormalizedAppointment, NookalAppointmentRequest, NOT_SPECIFIED
from core.utils import (
    extract_appointment,
    format_date_for_nookal,
    format_time_for_nookal,
    calculate_duration,
    resolve_practitioner_id,
)
import logging

log = logging.getLogger(__name__)

CLIENT_NAME_PREFIX = "PPM Booking - "
NOTES_PREFIX = "Blocked due to PPM appointment ID: "


class BlockedAppointmentService():
    """Mirrors a PPM booking into Nookal as a blocked appointment."""

    def __init__(self, nookal_client: NookalApi, practitioner_map: Mapping[str, str], default_practitioner_id: str) -> None:
        self.nookal = nookal_client
        self.practitioner_map = practitioner_map
        self.default_practitioner_id = default_practitioner_id

    async def block(self, payload: PPMWebhookPayload) -> Tuple[NormalizedAppointment, Any]:
        appointment = extract_appointment(payload)
        log.info(f"Mapped appointment data: {appointment.model_dump()}")

        nookal_appointment = self.build_request(appointment)
        log.info(f"Nookal appointment data: {nookal_appointment.model_dump()}")

        result = await self.nookal.create_appointment(nookal_appointment)
        log.info(f"Nookal appointment created: {result}")
        return appointment, result

    def build_request(self, appointment: NormalizedAppointment) -> NookalAppointmentRequest:
        return NookalAppointmentRequest(
            practitioner_id=resolve_practitioner_id(
                appointment.practitioner_name, self.practitioner_map, self.default_practitioner_id
            ),
            appointment_date=format_date_for_nookal(appointment.start_date),
            appointment_time=format_time_for_nookal(appointment.start_time),
            duration=calculate_duration(appointment.start_time, appointment.end_time),
            client_name=f"{CLIENT_NAME_PREFIX}{appointment.contact_name or NOT_SPECIFIED}",
            notes=f"{NOTES_PREFIX}{appointment.appointment_id or NOT_SPECIFIED}",
        )
