"""Fairness scoring and fraud alert aggregation for banking decision dashboards"""

__version__ = "0.1.0"
