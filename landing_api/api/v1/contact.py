from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
import logging

from landing_api.exceptions import DeliveryError, ValidationError
from landing_api.schemas.contact import ContactErrorResponse, ContactSubmission, ContactSuccessResponse
from landing_api.services.contact_service import ContactService, get_contact_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=ContactSuccessResponse,
    responses={400: {"model": ContactErrorResponse}, 500: {"model": ContactErrorResponse}},
)
async def contact_handler(
    form: ContactSubmission,
    contact_service: ContactService = Depends(get_contact_service),
):
    """
    Relay a landing page contact form submission by email

    - **firstName**, **lastName**, **email**, **message**: all required
    """
    try:
        await contact_service.submit(form)
    except ValidationError as e:
        logger.info(f"Rejected contact submission, missing or invalid fields: {e.fields}")
        return JSONResponse(
            status_code=400,
            content=ContactErrorResponse(error=str(e)).model_dump(),
        )
    except DeliveryError:
        return JSONResponse(
            status_code=500,
            content=ContactErrorResponse(error="Failed to send email").model_dump(),
        )

    return ContactSuccessResponse(message="Email sent successfully")
