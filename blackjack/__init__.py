"""Blackjack rules engine - 100% UI-agnostic."""

from blackjack.cards import Card, Deck, Rank, Suit, no_shuffle, random_shuffle
from blackjack.errors import (
    BlackjackError,
    DeckExhaustedError,
    DuplicateNameError,
    InvalidDecisionError,
    InvalidNameLengthError,
    InvalidPlayerCountError,
    TurnOrderError,
)
from blackjack.hand import Hand
from blackjack.participant import Participant, Role
from blackjack.participants import Participants
from blackjack.result import PlayerGameResult
from blackjack.rules import TableRules

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "no_shuffle",
    "random_shuffle",
    "BlackjackError",
    "DeckExhaustedError",
    "DuplicateNameError",
    "InvalidDecisionError",
    "InvalidNameLengthError",
    "InvalidPlayerCountError",
    "TurnOrderError",
    "Hand",
    "Participant",
    "Role",
    "Participants",
    "PlayerGameResult",
    "TableRules",
]
