from .catalog_provider import CatalogProvider
from .configuration import ConfigurationService

__all__ = [
    'CatalogProvider',
    'ConfigurationService',
]
