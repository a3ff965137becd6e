import os

AWS_REGION = os.getenv("AWS_REGION", "us-west-2")

POSTS_CONTAINER = os.getenv("POSTS_CONTAINER", "posts")
POSTS_DIR = os.getenv("POSTS_DIR", "posts")
POST_EXTENSION = os.getenv("POST_EXTENSION", ".md")
CONTENT_ROOT = os.getenv("CONTENT_ROOT", ".")

S3_ENDPOINT_URL = os.getenv("S3_ENDPOINT_URL")  # MinIO / LocalStack (http://localhost:9000)

# Comma-separated; more than one while a key is being rotated
PUBLISH_API_KEYS = [k.strip() for k in os.getenv("PUBLISH_API_KEYS", "").split(",") if k.strip()]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Injected into boto3 calls when an S3-compatible endpoint is configured
S3_KWARGS: dict = {}
if S3_ENDPOINT_URL:
    S3_KWARGS["endpoint_url"] = S3_ENDPOINT_URL
