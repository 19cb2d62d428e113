"""CareerPath AI: resume extraction, profile refinement and career advice wizard."""

__version__ = "0.1.0"
