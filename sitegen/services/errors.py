"""Exceptions raised by the generation services.

Routers translate these into HTTP errors; the CLI logs them and exits
non-zero.
"""


class GenerationError(Exception):
    """Base class for errors that abort a generation pass."""


class MissingSlugError(GenerationError):
    """A page in the tree has no slug for one of the configured languages."""

    def __init__(self, lang: str, page_name: str):
        self.lang = lang
        self.page_name = page_name
        super().__init__(f"No slug for page '{page_name}' in language '{lang}'.")


class PageTreeError(GenerationError):
    """The page tree is malformed (too deep to expand)."""


class HostingRulesError(GenerationError):
    """The baseline hosting rules are missing or malformed, or the rules file cannot be written."""


class TranslationFetchError(GenerationError):
    """Translation records could not be retrieved from the content store."""


class RouteSinkError(GenerationError):
    """Generated routes could not be handed to their destination."""
