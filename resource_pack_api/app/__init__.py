"""Resource Pack API application package."""

from .main import app  # noqa: F401
