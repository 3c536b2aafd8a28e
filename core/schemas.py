from pydantic import BaseModel, ConfigDict, PositiveInt, StringConstraints, field_validator
from typing import Any, Optional
from typing import Literal, Annotated


Datestr = Annotated[str, StringConstraints(pattern=r"^\d{4}-\d{2}-\d{2}$")]
Timestr = Annotated[str, StringConstraints(pattern=r"^\d{2}:\d{2}$")]

NOT_SPECIFIED = "Not specified"


class _PPMSection(BaseModel):
    model_config = ConfigDict(extra="allow")

    @field_validator("*", mode="before")
    @classmethod
    def numbers_as_text(cls, value):
        # PPM sends ids as numbers for some accounts
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


###########################################  PPM WEBHOOK

class PPMCustomData(_PPMSection):
    appointment_id: Optional[str] = None
    start_date: Optional[str] = None
    start_time: Optional[str] = None
    end_date: Optional[str] = None
    end_time: Optional[str] = None
    contact_name: Optional[str] = None
    contact_email: Optional[str] = None
    practitioner_name: Optional[str] = None


class PPMContact(_PPMSection):
    full_name: Optional[str] = None
    email: Optional[str] = None


class PPMWebhookPayload(BaseModel):
    model_config = ConfigDict(extra="allow")

    customData: Optional[PPMCustomData] = None
    contact: Optional[PPMContact] = None


class NormalizedAppointment(BaseModel):
    appointment_id: Optional[str] = None
    start_date: Optional[str] = None
    start_time: Optional[str] = None
    end_date: Optional[str] = None
    end_time: Optional[str] = None
    contact_name: Optional[str] = None
    contact_email: Optional[str] = None
    practitioner_name: str = NOT_SPECIFIED


###########################################  NOOKAL

class NookalAppointmentRequest(BaseModel):
    practitioner_id: str
    appointment_date: Optional[Datestr] = None
    appointment_time: Optional[Timestr] = None
    duration: PositiveInt
    appointment_type: Literal["BLOCKED"] = "BLOCKED"
    client_name: str
    notes: str
    status: Literal["confirmed"] = "confirmed"


################ Webhook responses

class WebhookSuccessResponse(BaseModel):
    success: Literal[True] = True
    message: str = "Appointment blocked in Nookal successfully"
    ppm_appointment_id: Optional[str] = None
    nookal_response: Any = None


class WebhookErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
    message: Optional[str] = None
