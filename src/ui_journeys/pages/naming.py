"""
Accessible-name conventions of the guidelines site.

Several controls are labelled by combining a topic name with a fixed prefix
or suffix. Those combinations are a contract with the site's markup and are
built here only, so a relabelling upstream is a one-line change.
"""

FAVOURITES_LINK = "Favourites"
FAVOURITES_TAB = "Favourites"
MY_FAVOURITES_TILE = "Navigate to My favourites page"
SEARCH_BOX = "Search"


def favourite_control_name(topic: str) -> str:
    """Star button on a topic page."""
    return f"Favourite {topic}"


def topic_tile_name(topic: str) -> str:
    """Tile that opens a topic from its guideline landing page."""
    return f"Navigate to {topic}"


def breadcrumb_name(topic: str) -> str:
    """Homepage shortcut button for a guideline."""
    return f"{topic}-breadcrumb"
