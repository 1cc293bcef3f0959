"""Domain layer: constants, errors and schemas."""

from .errors import ErrorCodes, SiteError
from .schemas import (
    AboutCategory,
    AuthenticationParameters,
    Designer,
    DesignerTheme,
    Exhibition,
    Project,
    SitemapEntry,
)

__all__ = [
    "ErrorCodes",
    "SiteError",
    "AboutCategory",
    "AuthenticationParameters",
    "Designer",
    "DesignerTheme",
    "Exhibition",
    "Project",
    "SitemapEntry",
]
