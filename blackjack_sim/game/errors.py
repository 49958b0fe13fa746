class BlackjackError(Exception):
    """Base class for every rule violation raised by the game engine."""


class EmptyDeckError(BlackjackError):
    """Raised when drawing from a deck with no cards left."""


class UnrecognizedActionError(BlackjackError):
    """Raised when a play strategy answers with something other than hit or stand."""

    def __init__(self, player_name: str, action) -> None:
        super().__init__(f'{player_name} chose an unknown action: {action!r}')
        self.player_name = player_name
        self.action = action


class InvalidBetError(BlackjackError):
    """Raised when a bet is negative, not a whole number or over the allowed amount."""

    def __init__(self, player_name: str, amount, reason: str) -> None:
        super().__init__(f'{player_name} placed an invalid bet of {amount!r}: {reason}')
        self.player_name = player_name
        self.amount = amount
        self.reason = reason
