"""API route modules."""

from . import cities
from . import reports

__all__ = ["cities", "reports"]
