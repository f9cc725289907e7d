"""Job-Recs: heuristic, explainable job recommendations for a job board."""

__version__ = "0.1.0"
