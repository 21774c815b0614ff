"""
Authenticated remote URLs for pushing to target repositories.
"""

import logging

logger = logging.getLogger(__name__)


def get_authenticated_url(token: str, url: str) -> str:
    """
    Create a remote URL with the access token embedded in it.

    Everything after the last ``//`` is kept and ``.git`` is always appended.
    The URL is not validated.

    Args:
        token: Access token to GitHub
        url: Repository URL such as ``https://github.com/org/repo``

    Returns:
        ``https://<token>@<host and path>.git``
    """
    host_and_path = url.split('//')[-1]

    if host_and_path.endswith('.git'):
        logger.warning(f"Repository URL already ends with .git, remote will end with .git.git: {host_and_path}")

    return f"https://{token}@{host_and_path}.git"
