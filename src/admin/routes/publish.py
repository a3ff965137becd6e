"""Publish route: upload changed posts to the blob container. POST /api/publish.

Flow:
  1. CI computes the changed files under posts/ and POSTs them here.
  2. Paths are resolved under CONTENT_ROOT; any path outside it rejects the whole request.
  3. Each post is uploaded as "<id>.md" with url / title / id metadata.
  4. Per-file results come back; 207 when any file was skipped or failed.
"""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from shared.auth import verify_publish_key
from shared.config import CONTENT_ROOT
from shared.models import PublishRequest, PublishResponse
from shared.posts import PostPathError, resolve_post_path, split_file_list
from shared.publisher import NOTHING_CHANGED, publish, publish_succeeded

router = APIRouter()


@router.post("/api/publish", response_model=PublishResponse)
def publish_posts(
    req: PublishRequest,
    response: Response,
    _: str = Depends(verify_publish_key),
):
    files = split_file_list(req.files)
    if not files:
        return PublishResponse(message=NOTHING_CHANGED)

    for file_path in files:
        try:
            resolve_post_path(file_path, CONTENT_ROOT)
        except PostPathError as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))

    results = publish(files, root=CONTENT_ROOT)

    if not publish_succeeded(results):
        response.status_code = status.HTTP_207_MULTI_STATUS
        uploaded = sum(r.status == "uploaded" for r in results)
        return PublishResponse(message=f"Uploaded {uploaded} of {len(results)} posts", results=results)

    return PublishResponse(message=f"Uploaded {len(results)} posts", results=results)
