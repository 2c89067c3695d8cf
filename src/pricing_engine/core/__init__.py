"""Core pricing, discount and payroll logic."""
