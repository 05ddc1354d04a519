# crucible/map/__init__.py

from .base import MapBase
from .cost_grid import CostGrid
from .generator import CostGridGenerator

__all__ = ["MapBase", "CostGrid", "CostGridGenerator"]
