"""Custom exception classes."""


class MapLayerError(Exception):
    """Base exception for geometry and layer errors."""

    def __init__(self, detail: str, code: str = "MAPLAYER_ERROR"):
        super().__init__(detail)
        self.detail = detail
        self.code = code


class VertexIndexError(MapLayerError, IndexError):
    def __init__(self, index: int, size: int, operation: str):
        super().__init__(
            detail=f"Vertex index {index} out of range for {operation} (size {size})",
            code="VERTEX_INDEX_OUT_OF_RANGE",
        )
        self.index = index
        self.size = size


class AttributeRowIndexError(MapLayerError, IndexError):
    def __init__(self, index: int, size: int, operation: str):
        super().__init__(
            detail=f"Attribute row index {index} out of range for {operation} (size {size})",
            code="ROW_INDEX_OUT_OF_RANGE",
        )
        self.index = index
        self.size = size


class UnknownColumnError(MapLayerError, KeyError):
    def __init__(self, column: str):
        super().__init__(
            detail=f"Unknown attribute column: {column}",
            code="UNKNOWN_COLUMN",
        )
        self.column = column

    def __str__(self) -> str:
        return self.detail


class InvalidStyleError(MapLayerError, ValueError):
    def __init__(self, detail: str):
        super().__init__(detail=detail, code="INVALID_STYLE")


class UnsupportedGeometryError(MapLayerError, TypeError):
    def __init__(self, obj: object):
        super().__init__(
            detail=f"Unsupported geometry type: {type(obj).__name__}",
            code="UNSUPPORTED_GEOMETRY",
        )


class InvalidFeatureObjectError(MapLayerError, ValueError):
    def __init__(self, errors: list[str]):
        self.errors = errors
        detail = f"Feature validation failed with {len(errors)} error(s): {'; '.join(errors[:5])}"
        if len(errors) > 5:
            detail += f" ... and {len(errors) - 5} more"
        super().__init__(detail=detail, code="INVALID_FEATURE_OBJECT")
