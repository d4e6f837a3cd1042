from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response
from app.config import Settings, get_settings
from app.errors import RelayError, UpstreamError, ValidationError
from app.schemas.upload import UploadRequest
from app.services.upload_relay import UploadRelay
import structlog

logger = structlog.get_logger()
router = APIRouter(prefix="/upload", tags=["upload"])

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Content-Type": "application/json",
}


def get_upload_relay(settings: Settings = Depends(get_settings)) -> UploadRelay:
    return UploadRelay(settings)


@router.post("")
async def upload_file(request: Request, relay: UploadRelay = Depends(get_upload_relay)):
    """
    Upload a base64-encoded file into a brand's folder of the static repository.

    Args:
        request: Raw request with a JSON body of brandName, fileName, fileContent
        relay: Upload relay built from the process settings

    Returns:
        The public URL of the uploaded file
    """
    try:
        payload = await request.json()
    except ValueError:
        logger.warning("Rejected upload with unparseable body")
        raise ValidationError("Invalid request body")

    try:
        upload_request = UploadRequest.from_payload(payload)
    except ValidationError as e:
        logger.warning("Rejected upload", error=e.error)
        raise

    logger.info(
        "Received upload",
        brand_name=upload_request.brandName,
        file_name=upload_request.fileName
    )

    try:
        result = await relay.upload(upload_request)
    except RelayError:
        raise
    except Exception as e:
        logger.error(
            "Upload failed",
            error=str(e),
            brand_name=upload_request.brandName,
            file_name=upload_request.fileName
        )
        raise UpstreamError(str(e))

    return JSONResponse(content=result.model_dump(), headers=CORS_HEADERS)


@router.options("")
async def upload_preflight():
    """CORS preflight."""
    return Response(status_code=200, content="", headers=CORS_HEADERS)
