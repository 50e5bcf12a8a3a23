"""
Summary statistics for finished simulation runs.
"""

from .performance import METRIC_KEYS, compute_metrics

__all__ = ['METRIC_KEYS', 'compute_metrics']
