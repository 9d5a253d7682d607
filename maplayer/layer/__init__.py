"""Layers and their attribute tables."""

from maplayer.layer.attributes import Attributes
from maplayer.layer.layer import Layer, merge_extents
from maplayer.layer.loader import load_features

__all__ = [
    "Attributes",
    "Layer",
    "merge_extents",
    "load_features",
]
