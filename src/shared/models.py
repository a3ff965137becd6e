from pydantic import BaseModel
from typing import Literal, Optional


class StorageCredentials(BaseModel):
    """Account credentials for the blob store. Account name/key map to the S3 access key pair."""

    account_name: str   # aws_access_key_id
    account_key: str    # aws_secret_access_key


# ── Posts ─────────────────────────────────────────────────────────────────────

class PostUploadTask(BaseModel):
    file_path: str     # relative to the content root e.g. "posts/hello-world.md"
    title: str         # first heading line, whitespace-collapsed
    slug: str          # e.g. "hello-world", stored as the "url" metadata key
    id: str            # file_path minus "posts/" and ".md"
    content: bytes     # uploaded verbatim

    @property
    def blob_name(self) -> str:
        return f"{self.id}.md"

    def metadata(self) -> dict[str, str]:
        return {"url": self.slug, "title": self.title, "id": self.id}


class PublishResult(BaseModel):
    file_path: str
    id: Optional[str] = None
    blob_name: Optional[str] = None
    status: Literal["uploaded", "skipped", "failed"]
    error: Optional[str] = None


# ── Publish API ───────────────────────────────────────────────────────────────

class PublishRequest(BaseModel):
    files: list[str] = []   # e.g. ["posts/hello-world.md", "posts/api-routing.md"]


class PublishResponse(BaseModel):
    message: str
    results: list[PublishResult] = []
