"""
The VIEW layer owns the drawing surface: scales, bar and axis items, the
renderer that reconciles them, and the Qt widgets hosting the chart.
"""
