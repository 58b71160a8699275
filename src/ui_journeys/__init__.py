"""
ui-journeys: end-to-end browser journeys for the guidelines web application.

Page models wrap each surface of the site; the scenario runner sequences
them into isolated, independently reproducible journeys.
"""

__version__ = "0.1.0"
