"""
Shared pytest fixtures.

Environment variables are set at module level, before any src/ imports,
so config.py reads the correct test values when fixtures are first evaluated.
"""

import os

# Must be set before any shared.* imports.
# Use setdefault so externally-passed env vars (integration tests) take precedence.
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("AWS_SESSION_TOKEN", "testing")
os.environ.setdefault("AWS_REGION", "us-west-2")
os.environ.setdefault("POSTS_CONTAINER", "posts")
os.environ.setdefault("PUBLISH_API_KEYS", "test-publish-key, test-rotated-key")

from pathlib import Path

import boto3
import pytest
from fastapi.testclient import TestClient
from moto import mock_aws

REGION = "us-west-2"
CONTAINER = "posts"

HELLO_WORLD = "# Hello World\n\nFirst post.\n"
API_ROUTING = (
    "# API Routing Using CloudFront Function\n"
    "\n"
    "Route `/api/*` requests at the edge.\n"
    "\n"
    "## Setup\n"
)
NO_HEADING = "Just prose, no heading.\n"


# ── Auth helper ─────────────────────────────────────────────────────────────────

PUBLISH_KEY = "test-publish-key"
ROTATED_KEY = "test-rotated-key"


def auth_headers(key: str = PUBLISH_KEY) -> dict[str, str]:
    return {"Authorization": f"Bearer {key}"}


def write_post(root: Path, relative: str, text: str) -> str:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return relative


# ── Content fixtures ────────────────────────────────────────────────────────────

@pytest.fixture()
def content_root(tmp_path: Path) -> Path:
    """A repo checkout with two posts and one post missing its heading."""
    write_post(tmp_path, "posts/hello-world.md", HELLO_WORLD)
    write_post(tmp_path, "posts/api-routing.md", API_ROUTING)
    write_post(tmp_path, "posts/draft.md", NO_HEADING)
    return tmp_path


# ── AWS fixtures ────────────────────────────────────────────────────────────────

@pytest.fixture()
def aws_env():
    """Start moto mock, create the posts bucket, yield an S3 client, teardown."""
    with mock_aws():
        s3 = boto3.client("s3", region_name=REGION)
        s3.create_bucket(
            Bucket=CONTAINER,
            CreateBucketConfiguration={"LocationConstraint": REGION},
        )
        yield s3


@pytest.fixture()
def client(aws_env, content_root, monkeypatch):
    """FastAPI TestClient with mocked AWS, serving posts from ``content_root``.
    Import app inside fixture so boto3 clients are always created inside the
    mock_aws context."""
    from admin.handler import app  # noqa: PLC0415
    from admin.routes import publish  # noqa: PLC0415

    monkeypatch.setattr(publish, "CONTENT_ROOT", str(content_root))
    return TestClient(app, raise_server_exceptions=True)
