import re
from pydantic import BaseModel
from typing import Any, Optional
from app.errors import ValidationError

BRAND_NAME_PATTERN = re.compile(r"^[a-z0-9-]+$")


class UploadRequest(BaseModel):
    brandName: str
    fileName: str
    fileContent: str  # base64, forwarded as-is

    @classmethod
    def from_payload(cls, payload: Any) -> "UploadRequest":
        """
        Build an upload request from a decoded JSON body.

        Args:
            payload: The parsed request body

        Returns:
            A validated UploadRequest

        Raises:
            ValidationError: If the body is not an object, a field is missing
                or empty, or the brand name has the wrong format
        """
        if not isinstance(payload, dict):
            raise ValidationError("Invalid request body")

        fields = {}
        for name in ("brandName", "fileName", "fileContent"):
            value = payload.get(name)
            if not isinstance(value, str) or not value:
                raise ValidationError("Missing required fields")
            fields[name] = value

        if not BRAND_NAME_PATTERN.fullmatch(fields["brandName"]):
            raise ValidationError(
                "Brand name must be lowercase alphanumeric with hyphens only"
            )

        return cls(**fields)

    @property
    def path(self) -> str:
        return f"{self.brandName}/{self.fileName}"


class UploadResponse(BaseModel):
    success: bool = True
    url: str
    message: str = "File uploaded successfully"


class ErrorResponse(BaseModel):
    error: str
    message: Optional[str] = None
