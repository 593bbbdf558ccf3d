"""
The HOST layer stands in for the analytics application that embeds the visual.
It supplies colors, selection identities and selection persistence; the visual
only consumes these services.
"""
