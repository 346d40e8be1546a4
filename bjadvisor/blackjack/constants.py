"""Blackjack-specific constants and value mappings."""

from bjadvisor.common.card import RANK_VALUES, Rank

CARDS_PER_DECK = 52

BLACKJACK_LIMIT = 21

# Blackjack point value of each rank, as defined by the card model.
BLACKJACK_VALUES = RANK_VALUES


class InvalidRankError(ValueError):
    """Raised when a value outside the Rank enumeration reaches value computation."""

    def __init__(self, rank):
        super().__init__(f"Found a card with the unknown rank, {rank!r}")
        self.rank = rank


def get_blackjack_value(rank: Rank) -> int:
    """Get the blackjack value for a given rank."""
    try:
        return BLACKJACK_VALUES[rank]
    except (KeyError, TypeError) as exc:
        raise InvalidRankError(rank) from exc
