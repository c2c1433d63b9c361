"""Custom exceptions for the power grid report."""

class GridReportError(Exception):
    """Base exception for grid report errors."""
    pass

class ConfigurationError(GridReportError):
    """Exception raised for configuration errors."""
    pass

class ValidationError(GridReportError):
    """Base exception for validation errors."""
    pass

class ValidationTypeError(ValidationError):
    """Exception raised for type validation errors."""
    pass

class ValidationRangeError(ValidationError):
    """Exception raised for range validation errors."""
    pass

class PlantCategoryError(ValidationError):
    """Exception raised for an unrecognised plant type or status name."""
    pass
