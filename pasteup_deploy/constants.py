"""Global constants for pasteup-deploy"""

from enum import Enum

APP_NAME = "pasteup-deploy"
LOG_FORMAT = "%(message)s"

# Project identification
PROJECT_CONFIG_FILE = ".pasteup-deploy.yaml"

# Remote storage defaults
DEFAULT_BUCKET = "pasteup"
DEFAULT_SCHEME = "s3"
DEFAULT_SYNC_TOOL = "s3cmd"
SYNC_TOOL_URL = "http://s3tools.org/s3cmd"

# Local layout, relative to the project root
DEFAULT_STAGING_DIR = "deploy_tmp"
DEFAULT_CSS_SOURCE = "docs/static/css"
DEFAULT_JS_SOURCE = "docs/static/js"
DEFAULT_DOCS_SOURCE = "docs"
DEFAULT_VERSIONS_FILE = "versions"

# Staged subdirectories
STAGED_CSS_DIR = "css"
STAGED_JS_DIR = "js"
STAGED_DOCS_DIR = "docs"

# Removed from the staged docs tree: the build scripts themselves, and static
# assets that are already published from the css/js trees.
DOCS_EXCLUDED_DIRS = ("build", "static")

# Cache headers
DEFAULT_CACHE_MAX_AGE = 60  # seconds
FAR_FUTURE_YEARS = 10
NEAR_FUTURE_MINUTES = 1
VERSIONS_MIME_TYPE = "application/json"

# Environment variables
ENV_CONFIG_PATH = "PASTEUP_DEPLOY_CONFIG"
ENV_BUCKET = "PASTEUP_DEPLOY_BUCKET"
ENV_SYNC_TOOL = "PASTEUP_DEPLOY_TOOL"


class DeployMode(Enum):
    """Which targets a deploy run publishes"""
    FULL = "full"
    VERSION_ONLY = "version"


# Error codes
class ErrorCode:
    CONFIG_FORMAT_ERROR = "DT001"
    VERSION_FILE_UNREADABLE = "DT002"
    VERSION_FORMAT_ERROR = "DT003"
    STAGING_FAILED = "DT004"
    VALIDATION_FAILED = "DT007"
    SYNC_FAILED = "DT008"


# Messages
MSG_CONFIRM_VERSION = "You are deploying version: {version}"
MSG_CONFIRM_PROMPT = "Is this the correct version number? (y/n)"
MSG_UPDATE_VERSION = "So update the version number in {path}"
MSG_CHOOSE_MODE = "Choose full or version deploy with --full, or --version argument."
MSG_SYNC_TOOL_HINT = (
    "ERROR: Have you installed and configured {tool}?\n"
    "{url}\n\n"
)
