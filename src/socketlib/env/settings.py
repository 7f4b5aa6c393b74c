"""Typed snapshot of the Socket API configuration.

Values are gathered through the env getters, so rewired and scoped overrides
are reflected in the snapshot taken at ``from_env()`` time.
"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from . import socket_cli
from .socket import get_socket_debug


class SocketSettings(BaseModel):
    """Socket API client settings resolved from the environment."""

    api_base_url: Optional[str] = None
    api_proxy: Optional[str] = None
    api_timeout: Union[int, float] = Field(default=0, ge=0)
    api_token: Optional[str] = None
    org_slug: Optional[str] = None
    accept_risks: bool = False
    view_all_risks: bool = False
    no_api_token: bool = False
    debug: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_env(cls) -> "SocketSettings":
        timeout = socket_cli.get_socket_cli_api_timeout()
        return cls(
            api_base_url=socket_cli.get_socket_cli_api_base_url(),
            api_proxy=socket_cli.get_socket_cli_api_proxy(),
            api_timeout=timeout if timeout > 0 else 0,
            api_token=socket_cli.get_socket_cli_api_token(),
            org_slug=socket_cli.get_socket_cli_org_slug(),
            accept_risks=socket_cli.get_socket_cli_accept_risks(),
            view_all_risks=socket_cli.get_socket_cli_view_all_risks(),
            no_api_token=socket_cli.get_socket_cli_no_api_token(),
            debug=get_socket_debug(),
        )

    def has_api_token(self) -> bool:
        """Whether requests should carry a token."""
        return bool(self.api_token) and not self.no_api_token
