"""Switch between installed SDK versions by relinking and updating the user environment."""

__version__ = "0.0.1"