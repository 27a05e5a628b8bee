"""
Search criteria and the coordinator that combines them.
"""
from .criteria import CRITERIA
from .coordinator import SearchCoordinator

__all__ = ['CRITERIA', 'SearchCoordinator']
