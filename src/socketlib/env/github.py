"""GitHub Actions environment variables."""

from typing import Optional

from .rewire import get_env_value


def get_github_api_url() -> Optional[str]:
    return get_env_value("GITHUB_API_URL")


def get_github_base_ref() -> Optional[str]:
    """Target branch of a pull request run."""
    return get_env_value("GITHUB_BASE_REF")


def get_github_ref_name() -> Optional[str]:
    return get_env_value("GITHUB_REF_NAME")


def get_github_ref_type() -> Optional[str]:
    """Either "branch" or "tag" on Actions runners."""
    return get_env_value("GITHUB_REF_TYPE")


def get_github_repository() -> Optional[str]:
    """The owner/name slug of the repository."""
    return get_env_value("GITHUB_REPOSITORY")


def get_github_server_url() -> Optional[str]:
    return get_env_value("GITHUB_SERVER_URL")


def get_github_token() -> Optional[str]:
    return get_env_value("GITHUB_TOKEN")


def get_gh_token() -> Optional[str]:
    """Token read by the gh CLI."""
    return get_env_value("GH_TOKEN")
