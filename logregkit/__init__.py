"""Binary logistic regression: CSV loading, gradient-descent training and prediction."""

__version__ = "0.1.0"