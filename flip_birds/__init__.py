"""Flip-Birds: a narrative side-scroller about a bird-boy looking for love."""

__version__ = "0.1.0"
