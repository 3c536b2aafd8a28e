from fastapi import APIRouter, Request, status, Depends
from fastapi.responses import JSONResponse
from typing import Optional
from config import Settings, get_settings
from core.schemas import PPMWebhookPayload, WebhookSuccessResponse, WebhookErrorResponse
from infra.appointment_service import BlockedAppointmentService
from sdk.nookal_sdk import NookalApi, NookalApiError
import json
import logging

log = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["PPM Webhooks"]
    )


def get_nookal_api(settings: Settings = Depends(get_settings)) -> Optional[NookalApi]:
    if not settings.nookal_api_key:
        return None
    return NookalApi.from_settings(settings)


def _error(content: dict) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)


@router.post(
    "/webhook",
    status_code=200,
    response_model=WebhookSuccessResponse,
    responses={500: {"model": WebhookErrorResponse}},
)
async def ppm_webhook(request: Request,
                      settings: Settings = Depends(get_settings),
                      nookal: Optional[NookalApi] = Depends(get_nookal_api)):
    request_id = getattr(request.state, "request_id", "N/A")

    if nookal is None:
        log.error(f"[{request_id}] NOOKAL_API_KEY not found in environment variables")
        return _error({"error": "Nookal API key not configured"})

    try:
        body = await request.json()
        log.info(f"[{request_id}] Received PPM webhook: {json.dumps(body, indent=2)}")

        payload = PPMWebhookPayload.model_validate(body)
        service = BlockedAppointmentService(
            nookal_client=nookal,
            practitioner_map=settings.practitioner_map,
            default_practitioner_id=settings.default_practitioner_id,
        )
        appointment, nookal_result = await service.block(payload)

    except NookalApiError as e:
        log.error(f"[{request_id}] Nookal API error ({e.status_code}): {e.body}")
        return _error({"error": "Failed to create Nookal appointment", "details": e.body})

    except Exception as e:
        log.exception(f"[{request_id}] Integration error: {e}")
        return _error({"error": "Internal server error", "message": str(e)})

    return WebhookSuccessResponse(
        ppm_appointment_id=appointment.appointment_id,
        nookal_response=nookal_result,
    )
