from .classifier import classify, classify_fields
from .client import RedlineClient
from .segments import build_segments, find_crossings, gradient_stops, point_colors

__all__ = [
    'RedlineClient',
    'build_segments',
    'classify',
    'classify_fields',
    'find_crossings',
    'gradient_stops',
    'point_colors',
]
