"""
bjadvisor: blackjack playing and betting advice.

Basic strategy tells a player what to do with a hand against the dealer's
upcard; the Hi-Lo strategy adds card counting to size the bet.
"""

__version__ = "0.1.0"
