from maplayer.rendering.instructions import (
    EllipseShape,
    PathShape,
    RenderInstruction,
    build_render_instruction,
    layer_render_instructions,
)

__all__ = [
    "EllipseShape",
    "PathShape",
    "RenderInstruction",
    "build_render_instruction",
    "layer_render_instructions",
]
