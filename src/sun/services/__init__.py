"""
Domain services: repository calls in each vertical's vocabulary
"""

from .apollo import ApolloService
from .briareus import BriareusService
from .cerberus import CerberusService

__all__ = ["ApolloService", "BriareusService", "CerberusService"]
