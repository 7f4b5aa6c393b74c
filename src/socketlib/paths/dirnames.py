"""Directory name constants."""

NODE_MODULES = "node_modules"
DOT_GIT_DIR = ".git"
DOT_GITHUB = ".github"
DOT_SOCKET_DIR = ".socket"
CACHE_DIR = "cache"
CACHE_TTL_DIR = "ttl"
CACHE_GITHUB_DIR = "github"

# Socket app directories are named "<prefix><app>" under the user dir.
SOCKET_APP_PREFIX = "_"
SOCKET_CLI_APP_NAME = "socket"
SOCKET_DLX_APP_NAME = "dlx"
SOCKET_REGISTRY_APP_NAME = "registry"
