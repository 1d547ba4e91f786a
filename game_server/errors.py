class GameError(Exception):
    """Base for every recoverable game failure.

    `status_code` is what the HTTP layer answers with; the message is shown
    to the player as-is.
    """
    status_code = 400
    default_message = "Game error"

    def __init__(self, message: str = None):
        super().__init__(message or self.default_message)


class EmptyGuessError(GameError):
    status_code = 400
    default_message = "Guess is empty"


class RoundNotFoundError(GameError):
    status_code = 404
    default_message = "Round not found"


class RoundNotStartedError(GameError):
    status_code = 409
    default_message = "Round has not started"


class RoundAlreadyWonError(GameError):
    status_code = 409
    default_message = "Round is already won, start a new one"


class DuplicateGuessError(GameError):
    status_code = 409
    default_message = "You already guessed this card"


class CardNotFoundError(GameError):
    status_code = 404
    default_message = "Card not found, check the name"


class CardLookupError(GameError):
    """The card database could not be reached or answered garbage."""
    status_code = 502
    default_message = "Failed to fetch card data, try again later"
