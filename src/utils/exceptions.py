class MainCountriesError(Exception):
    """Base exception for the project."""

class DataLoadError(MainCountriesError):
    """Raised when JSON / data files cannot be loaded."""

class InvalidInputError(MainCountriesError):
    """Raised when the classifier is called without a product or reference table."""
