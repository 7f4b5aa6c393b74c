"""Package manager detection.

The running package manager is identified from ``npm_config_user_agent``,
which npm, pnpm, yarn and bun all set for lifecycle scripts, e.g.
``pnpm/8.15.1 npm/? node/v20.11.0 darwin arm64``. When it is missing the
interpreter path in ``sys.argv[0]`` is inspected instead.
"""

import re
import sys
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

from .rewire import get_env_value

PackageManagerType = Literal["npm", "pnpm", "yarn", "bun"]

_AGENT_NAME = re.compile(r"^(npm|pnpm|yarn|bun)/")
_AGENT_INFO = re.compile(r"^([^/]+)/(\S+)")

# Checked in order; the node_modules entry only applies when nothing else matched.
_ARGV_PATTERNS: tuple[tuple[PackageManagerType, tuple[str, ...]], ...] = (
    ("pnpm", ("/pnpm/", "\\pnpm\\")),
    ("yarn", ("/yarn/", "\\yarn\\", "/.yarn/", "\\.yarn\\")),
    ("bun", ("/bun/", "\\bun\\")),
    ("npm", ("/node_modules/", "\\node_modules\\")),
)


class PackageManagerInfo(BaseModel):
    """Name and version parsed from the package manager user agent."""
    name: str
    version: str

    model_config = ConfigDict(frozen=True)


def get_package_manager_user_agent() -> Optional[str]:
    return get_env_value("npm_config_user_agent")


def detect_package_manager() -> Optional[PackageManagerType]:
    """Detect which package manager launched the current process.

    Returns:
        "npm", "pnpm", "yarn" or "bun", or None when it cannot be told
    """
    user_agent = get_package_manager_user_agent()
    if user_agent:
        match = _AGENT_NAME.match(user_agent)
        if match:
            return match.group(1)  # type: ignore[return-value]

    argv0 = sys.argv[0] if sys.argv else ""
    if argv0:
        for name, needles in _ARGV_PATTERNS:
            if any(needle in argv0 for needle in needles):
                return name

    return None


def get_package_manager_info() -> Optional[PackageManagerInfo]:
    """Parse the name and version from the user agent, if one is set."""
    user_agent = get_package_manager_user_agent()
    if not user_agent:
        return None

    match = _AGENT_INFO.match(user_agent)
    if match:
        return PackageManagerInfo(name=match.group(1), version=match.group(2))
    return None
