"""
Post publisher: upload changed posts to the blob container.

Flow (per file, sequentially, in input order):
  1. Read the post and derive title / slug / id (shared.posts).
  2. Upload the raw bytes as "<id>.md" with url / title / id metadata.

Blob names are deterministic from the file path, so re-running with the same
files overwrites the same blobs.
"""

import logging
from pathlib import Path
from typing import Iterable

from botocore.exceptions import BotoCoreError, ClientError

from shared.blob import get_blob_client, upload_blob
from shared.config import POSTS_CONTAINER
from shared.models import PublishResult, StorageCredentials
from shared.posts import MissingTitleError, PostPathError, build_upload_task

logger = logging.getLogger(__name__)

NOTHING_CHANGED = "Nothing changed"


def publish(
    files: Iterable[str],
    credentials: StorageCredentials | None = None,
    *,
    root: str | Path = ".",
    container: str = POSTS_CONTAINER,
    client=None,
) -> list[PublishResult]:
    files = list(files)
    if not files:
        logger.info(NOTHING_CHANGED)
        return []

    client = client or get_blob_client(credentials)
    return [_publish_one(file_path, root, container, client) for file_path in files]


def publish_succeeded(results: list[PublishResult]) -> bool:
    return all(r.status == "uploaded" for r in results)


def _publish_one(file_path: str, root: str | Path, container: str, client) -> PublishResult:
    try:
        task = build_upload_task(file_path, root)
    except (MissingTitleError, PostPathError, OSError) as exc:
        logger.error("Skipping %s: %s", file_path, exc)
        return PublishResult(file_path=file_path, status="skipped", error=str(exc))

    logger.info("Uploading %s", task.id)

    try:
        upload_blob(container, task.blob_name, task.content, task.metadata(), client=client)
    except (ClientError, BotoCoreError) as exc:
        logger.exception("Upload of %s to %s/%s failed", file_path, container, task.blob_name)
        return PublishResult(
            file_path=file_path,
            id=task.id,
            blob_name=task.blob_name,
            status="failed",
            error=str(exc),
        )

    return PublishResult(
        file_path=file_path,
        id=task.id,
        blob_name=task.blob_name,
        status="uploaded",
    )
