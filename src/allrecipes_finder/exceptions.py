"""Custom exceptions for the AllRecipes finder agent."""


class RecipeFinderError(Exception):
    """Base exception for AllRecipes finder errors."""

    pass


class ConfigurationError(RecipeFinderError):
    """Raised when an agent configuration override is invalid."""

    pass


class AgentRunError(RecipeFinderError):
    """Raised when an agent run fails."""

    pass
