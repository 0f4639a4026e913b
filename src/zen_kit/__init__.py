"""zen-kit: client toolkit for the Zen notes application.

This package provides:
- An asynchronous client for templates, tags and focus modes
- Template export to a portable JSON file
- Template import with sequential, abort-on-failure replay
- Configuration from environment variables and .env files
"""

from .__version__ import __version__
from .client import AsyncClient
from .config_factory import ConfigFactory, create_config, load_config
from .exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    ConflictError,
    FormatError,
    ImportExportError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    ServerError,
    TemplateCreateError,
    ValidationError,
    ZenError,
)
from .export import FileDelivery, TemplateExporter, TemplateImporter
from .models import (
    FocusMode,
    ImportFailureKind,
    ImportResult,
    RetryConfig,
    Tag,
    Template,
    TemplateExport,
    ZenConfig,
)
from .protocols import AsyncHTTPClient, ConfigProvider, TemplateCreator
from .status import FileInput, StatusReporter

__all__ = [
    "__version__",
    # Client
    "AsyncClient",
    # Configuration
    "ZenConfig",
    "RetryConfig",
    "ConfigFactory",
    "create_config",
    "load_config",
    # Models
    "Template",
    "Tag",
    "FocusMode",
    "TemplateExport",
    "ImportResult",
    "ImportFailureKind",
    # Export/Import
    "TemplateExporter",
    "TemplateImporter",
    "FileDelivery",
    "StatusReporter",
    "FileInput",
    # Protocols (for dependency injection)
    "ConfigProvider",
    "AsyncHTTPClient",
    "TemplateCreator",
    # Exceptions
    "ZenError",
    "ConfigurationError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
    "NetworkError",
    "RateLimitError",
    "ServerError",
    "ImportExportError",
    "FormatError",
    "TemplateCreateError",
]
