"""
Process roster sources: random generation and roster files.
"""

from .generator import generate_roster
from .roster_file import load_roster, parse_roster

__all__ = ['generate_roster', 'load_roster', 'parse_roster']
