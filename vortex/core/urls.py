"""Repository and deployment URL helpers."""

import re

from vortex.core.exceptions import RepositoryUrlError

_GITHUB_PATH = re.compile(r"github\.com/([^/]+)/([^/]+?)(?:\.git)?$")


def parse_repository_url(url: str) -> tuple[str, str]:
    """Split a GitHub repository URL into ``(owner, repo)``.

    A trailing ``.git`` is dropped from the repository name. Raises
    RepositoryUrlError when the path is not exactly owner/repo.
    """
    match = _GITHUB_PATH.search(url)
    if not match:
        raise RepositoryUrlError(url)
    owner, repo = match.groups()
    return owner, repo


def normalize_url(url: str | None) -> str | None:
    """Turn a bare host such as ``my-app.vercel.app`` into an https URL."""
    if not url:
        return url
    if url.startswith(("https://", "http://")):
        return url
    return f"https://{url}"
