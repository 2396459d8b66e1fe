"""EulerTrail custom exceptions."""


class EulerTrailError(Exception):
    """Base exception for EulerTrail errors."""


class InvalidGraphError(EulerTrailError):
    """Incidence data cannot form a graph."""


class UnknownVertexError(EulerTrailError):
    """Vertex was not part of the graph at construction."""


class AmbiguousEdgeError(EulerTrailError):
    """Edge resolves to more than one other endpoint."""


class DanglingEdgeError(EulerTrailError):
    """Edge resolves to no other endpoint."""


class UnknownSampleError(EulerTrailError):
    """No sample graph with the requested name."""
