"""Recipe API connectors."""

from .base import BaseRecipeConnector
from .forkify_connector import ForkifyConnector

__all__ = ["BaseRecipeConnector", "ForkifyConnector"]
