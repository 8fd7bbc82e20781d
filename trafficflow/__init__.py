"""Traffic flow growth forecasting: model, validation, project files, grid and charts."""

__version__ = "1.0.0"
__all__ = ["__version__"]