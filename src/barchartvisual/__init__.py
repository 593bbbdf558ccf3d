"""Categorical bar chart visual rendered on a Qt vector scene."""
