from urllib.parse import quote
from app.config import Settings
from app.errors import ConfigurationError
from app.schemas.upload import UploadRequest, UploadResponse
from app.services.github_service import GitHubService
import structlog

logger = structlog.get_logger()


class UploadRelay:
    """Forwards validated uploads to the static media repository."""

    def __init__(self, settings: Settings):
        self.settings = settings

    async def upload(self, request: UploadRequest) -> UploadResponse:
        """
        Create or overwrite a brand's file in the repository.

        Args:
            request: Validated upload request

        Returns:
            Response carrying the file's public URL

        Raises:
            ConfigurationError: If the GitHub token or username is missing
            UpstreamError: If GitHub rejects the write
        """
        if not self.settings.github_token or not self.settings.github_username:
            logger.error("GitHub credentials are not configured")
            raise ConfigurationError()

        github = GitHubService(self.settings)

        # Sha is required by GitHub to overwrite an existing file
        sha = await github.get_file_sha(request.path)

        await github.put_file(
            request.path,
            message=f"Upload {request.fileName} for {request.brandName}",
            content=request.fileContent,
            sha=sha
        )

        url = f"{self.settings.public_base_url.rstrip('/')}/{quote(request.path, safe='/')}"

        logger.info(
            "Uploaded file",
            brand_name=request.brandName,
            file_name=request.fileName,
            overwritten=sha is not None,
            url=url
        )

        return UploadResponse(url=url)
