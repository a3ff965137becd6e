"""
Post parsing: title, slug and id derivation for Markdown posts.

A post's title is its first heading line:

    # API Routing Using CloudFront Function

    Body text...

which yields:
    title = "API Routing Using CloudFront Function"
    slug  = "api-routing-using-cloudfront-function"   (stored as the "url" metadata key)
    id    = "api-routing"                             (for posts/api-routing.md)
"""

import posixpath
import re
from pathlib import Path
from typing import Iterable

from shared.config import POST_EXTENSION, POSTS_DIR
from shared.models import PostUploadTask

HEADING_MARKER = "#"

_BLANK_RE = re.compile(r"[ \t]")
_BLANKS_RE = re.compile(r"[ \t]+")
_NON_SLUG_RE = re.compile(r"[^a-z0-9-]")

# like the shell `read`: blanks only, plus the \r of CRLF files
_LINE_TRIM = " \t\r"


class MissingTitleError(ValueError):
    """The post has no heading line to take a title from."""


class PostPathError(ValueError):
    """The post path is absolute or resolves outside the content root."""


def extract_title(lines: Iterable[str]) -> str | None:
    """
    Return the text of the first heading line, or None if there is none.

    Only the first marker character is dropped, so "## Sub" gives "# Sub".
    """
    for line in lines:
        line = line.strip(_LINE_TRIM)
        if line.startswith(HEADING_MARKER):
            return _BLANKS_RE.sub(" ", line[len(HEADING_MARKER):]).strip(" \t")
    return None


def slugify(title: str) -> str:
    slug = _BLANK_RE.sub("-", title).lower()
    return _NON_SLUG_RE.sub("", slug)


def post_id(file_path: str, posts_dir: str = POSTS_DIR, extension: str = POST_EXTENSION) -> str:
    """Strip the leading posts directory and the trailing extension: posts/my-post.md → my-post."""
    value = posixpath.normpath(file_path.replace("\\", "/"))
    prefix = posts_dir.strip("/") + "/"
    if value.startswith(prefix):
        value = value[len(prefix):]
    if extension and value.endswith(extension):
        value = value[: -len(extension)]
    return value


def split_file_list(values: Iterable[str]) -> list[str]:
    """Flatten whitespace-separated file lists ("posts/a.md posts/b.md") into single paths."""
    return [path for value in values for path in value.split()]


def resolve_post_path(file_path: str, root: str | Path) -> Path:
    root_path = Path(root).resolve()
    if Path(file_path).is_absolute():
        raise PostPathError(f"Post path must be relative to the content root: {file_path!r}")

    path = (root_path / file_path).resolve()
    if not path.is_relative_to(root_path):
        raise PostPathError(f"Post path escapes the content root: {file_path!r}")
    return path


def build_upload_task(file_path: str, root: str | Path = ".") -> PostUploadTask:
    """
    Read a post from disk and derive everything needed to upload it.

    Raises:
      PostPathError      path is absolute or outside ``root``
      OSError            post is missing, a directory, or unreadable
      MissingTitleError  post has no heading line
    """
    content = resolve_post_path(file_path, root).read_bytes()

    title = extract_title(content.decode("utf-8", errors="replace").split("\n"))
    if title is None:
        raise MissingTitleError(f"No heading line found in {file_path!r}")

    return PostUploadTask(
        file_path=file_path,
        title=title,
        slug=slugify(title),
        id=post_id(file_path),
        content=content,
    )
