"""Lightweight shared helpers for the models layer."""

from .image_io import encode_png, load_image, save_png
from .naming import STAGE_PREFIXES, apply_stage_prefix, strip_prefix

__all__ = [
    "STAGE_PREFIXES",
    "apply_stage_prefix",
    "strip_prefix",
    "load_image",
    "encode_png",
    "save_png",
]
