"""Prompt layers and composition."""

from .composer import TOLERANCE, ComposedPrompt, architecture_layer, compose, style_layer
from .layers import DOMAIN_KNOWLEDGE_LAYER, OUTPUT_FORMAT_LAYER, ROLE_LAYER, STYLE_LAYERS

__all__ = [
    "TOLERANCE",
    "ComposedPrompt",
    "architecture_layer",
    "compose",
    "style_layer",
    "DOMAIN_KNOWLEDGE_LAYER",
    "OUTPUT_FORMAT_LAYER",
    "ROLE_LAYER",
    "STYLE_LAYERS",
]
