# cubetex/graphics/core/__init__.py
from cubetex.graphics.core.settings import (
    ProjectionSettings,
    SphereSettings,
    ViewerSettings,
)

__all__ = [
    "ViewerSettings",
    "ProjectionSettings",
    "SphereSettings",
]
