import httpx
from typing import Optional
from urllib.parse import quote
from app.config import Settings
from app.errors import UpstreamError
import structlog

logger = structlog.get_logger()


class GitHubService:
    def __init__(self, settings: Settings):
        self.api_url = settings.github_api_url.rstrip("/")
        self.owner = settings.github_username
        self.repo = settings.github_repo
        self.timeout = settings.github_timeout
        self.headers = {
            "Authorization": f"token {settings.github_token}",
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": settings.user_agent,
        }

    def contents_url(self, path: str) -> str:
        return f"{self.api_url}/repos/{self.owner}/{self.repo}/contents/{quote(path, safe='/')}"

    async def get_file_sha(self, path: str) -> Optional[str]:
        """
        Look up the blob sha of an existing file in the repository.

        Any failure (missing file, auth problem, network error) is treated
        as "file does not exist" so that the upload goes ahead as a create.

        Args:
            path: File path inside the repository

        Returns:
            The file's sha, or None if it could not be determined
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(self.contents_url(path), headers=self.headers)

            if not response.is_success:
                logger.debug(
                    "No existing file found",
                    path=path,
                    status_code=response.status_code
                )
                return None

            return response.json().get("sha")

        except Exception as e:
            # Existence check must never abort the upload
            logger.debug("Existence check failed", path=path, error=str(e))
            return None

    async def put_file(
        self,
        path: str,
        message: str,
        content: str,
        sha: Optional[str] = None
    ) -> None:
        """
        Create or update a file through the contents API.

        Args:
            path: File path inside the repository
            message: Commit message
            content: Base64-encoded file content, sent verbatim
            sha: Current sha of the file when overwriting

        Raises:
            UpstreamError: If GitHub does not answer with a success status
        """
        payload = {"message": message, "content": content}
        if sha:
            payload["sha"] = sha

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.put(
                self.contents_url(path),
                headers={**self.headers, "Content-Type": "application/json"},
                json=payload
            )

        if not response.is_success:
            try:
                detail = response.json().get("message")
            except (ValueError, AttributeError):
                detail = None

            logger.error(
                "GitHub rejected upload",
                path=path,
                status_code=response.status_code,
                error=detail
            )
            raise UpstreamError(detail or "GitHub upload failed")

        logger.debug("GitHub accepted upload", path=path, status_code=response.status_code)
