"""
Domain services: one facade per Terra entity kind.

Each service binds the server's resource naming to the request builder and decoder.
Services are stateless; get them from TerraClient (e.g. `client.categories`).
"""

from application.services.base import DeletableMemeService, MemeService, Service, SynonymHostService
from application.services.categories import CategoriesService
from application.services.headings import HeadingsService
from application.services.operating_companies import OperatingCompaniesService
from application.services.options import OptionsService
from application.services.properties import PropertiesService
from application.services.superheadings import SuperheadingsService
from application.services.synonyms import SynonymsService
from application.services.taxonomies import TaxonomiesService
from application.services.users import UsersService

__all__ = [
    # Bases
    "Service",
    "MemeService",
    "DeletableMemeService",
    "SynonymHostService",
    # Meme kinds
    "TaxonomiesService",
    "CategoriesService",
    "HeadingsService",
    "SuperheadingsService",
    "PropertiesService",
    "OptionsService",
    "SynonymsService",
    # Accounts
    "OperatingCompaniesService",
    "UsersService",
]
