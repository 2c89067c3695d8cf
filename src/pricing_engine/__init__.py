"""Pricing Engine - subscription pricing, payroll tax and payment checks."""

__version__ = "0.1.0"
