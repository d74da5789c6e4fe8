from .mesh import Mesh, LODModel
from .primitives import CubeMesh, UVSphereMesh, PlaneMesh, CylinderMesh

__all__ = [
    'Mesh',
    'LODModel',
    'CubeMesh',
    'UVSphereMesh',
    'PlaneMesh',
    'CylinderMesh',
]
