# draftboard/__init__.py
"""
Match recorder and statistics engine for MOBA esports results.

Matches are stored as fixed-width 118-column rows; the plugins under
`draftboard.plugins` reduce those rows into summary, player, hero and
draft statistics.
"""

__version__ = "0.3.0"
