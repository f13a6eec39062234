"""Exceptions raised by the hull and bounding rectangle kernel."""


class GeometryError(Exception):
    """Base exception for geometry operations."""


class ConstructionError(GeometryError):
    """An exact number could not be built."""


class DivisionByZero(ConstructionError, ZeroDivisionError):
    """Zero denominator at construction or division time."""


class IrrationalRootError(ConstructionError, ValueError):
    """Square root has no exact rational value."""


class InputError(GeometryError, ValueError):
    """Caller supplied unusable input."""


class InsufficientPointsError(InputError):
    """Not enough points for the requested operation."""


class PointFormatError(InputError):
    """Point text or point file could not be parsed."""


class InexactInputError(InputError, TypeError):
    """Floating-point value passed where an exact number is required."""


class StructuralError(GeometryError):
    """Input has the wrong shape for the requested operation."""


class DegenerateHullError(StructuralError):
    """Hull has fewer than three vertices, so it encloses no area."""


class NotConvexError(StructuralError):
    """Vertex sequence is not a strictly convex counter-clockwise polygon."""
