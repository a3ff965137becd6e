"""Blob container helpers: S3 client construction and post uploads."""

import base64

import boto3

from shared.config import AWS_REGION, S3_KWARGS
from shared.models import StorageCredentials

# Containers map onto S3 buckets; blob names onto object keys.
# moto is used in tests; S3_ENDPOINT_URL points at MinIO/LocalStack for local dev.

CONTENT_TYPE = "text/markdown; charset=utf-8"


def encode_metadata_value(value: str) -> str:
    """
    S3 metadata travels as HTTP headers and botocore rejects non-ASCII values.

    ASCII values pass through unchanged; anything else becomes an RFC 2047
    encoded-word, the form S3 itself returns for non-ASCII metadata:
        "Café" -> "=?utf-8?b?Q2Fmw6k=?="
    """
    if value.isascii():
        return value
    return f"=?utf-8?b?{base64.b64encode(value.encode('utf-8')).decode('ascii')}?="


def get_blob_client(credentials: StorageCredentials | None = None):
    """Return an S3 client. Without explicit credentials boto3's default chain applies."""
    kwargs = dict(S3_KWARGS)
    if credentials is not None:
        kwargs["aws_access_key_id"] = credentials.account_name
        kwargs["aws_secret_access_key"] = credentials.account_key
    return boto3.client("s3", region_name=AWS_REGION, **kwargs)


def upload_blob(
    container: str,
    blob_name: str,
    content: bytes,
    metadata: dict[str, str],
    *,
    client=None,
) -> None:
    """Upload raw bytes as ``container/blob_name``, overwriting any existing blob."""
    (client or get_blob_client()).put_object(
        Bucket=container,
        Key=blob_name,
        Body=content,
        ContentType=CONTENT_TYPE,
        Metadata={k: encode_metadata_value(v) for k, v in metadata.items()},
    )
