"""Errors that abort a whole run rather than failing a single module."""

# Exit codes 0..254 report the number of failed modules.
MAX_FAILURE_EXIT_CODE = 254
INFRASTRUCTURE_EXIT_CODE = 255


class InfrastructureError(Exception):
    """Raised when the orchestrator itself cannot continue."""


class CatalogueError(InfrastructureError):
    """Raised when the module catalogue is missing or invalid."""


class ArtifactError(InfrastructureError):
    """Raised when a log artifact cannot be created or written."""


class EngineNotFoundError(InfrastructureError):
    """Raised when a test engine is not found."""
