"""
Upload changed posts to the posts blob container.

CI passes the changed files as one whitespace-separated argument:

    upload-posts "$ACCOUNT_NAME" "$ACCOUNT_KEY" "posts/a.md posts/b.md"

or as separate arguments:

    upload-posts --root .. "$ACCOUNT_NAME" "$ACCOUNT_KEY" posts/a.md posts/b.md

Exits 1 if any post was skipped (no heading, missing file) or failed to upload.
"""

import logging
import sys

import click

from shared.config import LOG_LEVEL, POSTS_CONTAINER
from shared.models import StorageCredentials
from shared.posts import split_file_list
from shared.publisher import publish, publish_succeeded

LOGGER = logging.getLogger("uploader")


def _configure_logging() -> None:
    """Plain stdout lines so CI logs read "Uploading <id>"."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    for name in ("uploader", "shared"):
        logger = logging.getLogger(name)
        # replace, not append: sys.stdout differs between invocations under CliRunner
        logger.handlers = [handler]
        logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))


@click.command()
@click.version_option(version="0.1.0", prog_name="upload-posts")
@click.option(
    "--root",
    default=".",
    show_default=True,
    type=click.Path(exists=True, file_okay=False),
    help="Directory the post paths are relative to.",
)
@click.option(
    "--container",
    default=POSTS_CONTAINER,
    show_default=True,
    help="Target blob container.",
)
@click.argument("account_name")
@click.argument("account_key")
@click.argument("files", nargs=-1)
def main(root: str, container: str, account_name: str, account_key: str, files: tuple[str, ...]):
    """Upload changed posts with url / title / id metadata."""
    _configure_logging()

    credentials = StorageCredentials(account_name=account_name, account_key=account_key)
    results = publish(split_file_list(files), credentials, root=root, container=container)
    if not results:
        return

    counts = {s: sum(r.status == s for r in results) for s in ("uploaded", "skipped", "failed")}
    LOGGER.info("Uploaded %(uploaded)d, skipped %(skipped)d, failed %(failed)d", counts)

    if not publish_succeeded(results):
        sys.exit(1)


if __name__ == "__main__":
    main()
