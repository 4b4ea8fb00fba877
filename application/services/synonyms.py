from application.services.base import DeletableMemeService
from domain.schemas import Synonym


class SynonymsService(DeletableMemeService[Synonym]):
    """
    Get, update and delete synonyms directly.

    Creating and attaching synonyms happens through the service of the meme they belong to,
    e.g. `client.categories.add_synonym(category, "Tex-Mex")`.
    """

    resource = "synonym"
    model = Synonym
