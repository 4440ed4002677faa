"""Annotation size constants and their process-wide configuration."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class AnnotationConfig:
    """Sizes used by the annotation primitives, in surface units."""

    hatch_length: float = 5.0
    hatch_spacing: float = 7.0
    arrow_length: float = 10.0
    arrow_spacing: float = 10.0
    arrow_angle: float = 45.0
    arrow_center_shift: float = 5.0
    right_angle_size: float = 10.0
    angle_radius: float = 15.0
    angle_step: float = 5.0
    small_angle_threshold: float = 45.0
    small_angle_radius: float = 10.0


_ANNOTATION_CONFIG = AnnotationConfig()


def get_annotation_config() -> AnnotationConfig:
    return copy.deepcopy(_ANNOTATION_CONFIG)


def set_annotation_config(config: AnnotationConfig) -> None:
    global _ANNOTATION_CONFIG
    _ANNOTATION_CONFIG = copy.deepcopy(config)
