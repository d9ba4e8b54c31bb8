"""Matrix paths: segments with ``;key=value`` attributes.

Usage:
    from matrixpath.matrix import MatrixPath, MatrixPathPattern

    path = MatrixPath.parse("abc;version=1/def;version=2;color=green/xyz")
    path.matches(MatrixPathPattern.parse("abc;version=?/def*;color=gr*/xyz"))
"""

from .builder import BuilderState, MatrixPathBuilder
from .element import AttributeState, MatrixElement, MatrixElementPattern, PathElement
from .path import MatrixPath, MatrixPathPattern

__all__ = [
    # Elements
    "AttributeState",
    "PathElement",
    "MatrixElement",
    "MatrixElementPattern",
    # Parsing
    "BuilderState",
    "MatrixPathBuilder",
    # Paths
    "MatrixPath",
    "MatrixPathPattern",
]
