"""Forum moderation and notification package.

Holds the report lifecycle, mention fan-out and notification inbox used by
the forum request layer.
"""
