"""
The MODEL layer contains pure data structures and the view-model transform.
It has NO knowledge of the GUI (Qt) or of how the chart is drawn.
"""
