"""Error codes reported by the staking program."""

from __future__ import annotations

from enum import Enum


class RichieError(Enum):
    """Every failure the program reports, with its code and message."""

    UNAUTHORIZED = (6000, "UnAuthorized.")
    TOO_MANY_MULTIPLIERS = (6001, "Too many multipliers provided")
    INSUFFICIENT_STAKE = (6002, "Not enough tokens staked.")
    EPOCH_TOO_SOON = (6003, "Epoch duration has not passed yet.")
    INVALID_REWARD_AMOUNT = (6004, "Invalid reward amount to create new epoch.")
    NO_REWARD = (6005, "No reward to claim.")
    INVALID_STAKE_TIME = (6006, "This is invalid time to stake.")
    INVALID_EPOCH_INDEX = (6007, "This is invalid epoch index.")
    INVALID_USER_STAKE = (6008, "This is invalid user stake account.")
    ALREADY_CALCULATED = (6009, "The reward was already calculated.")
    UNFINISHED_EPOCH = (6010, "The epoch is not finished yet.")
    INVALID_LOCK_PERIOD = (6011, "Invalid lock period")
    NOTHING_TO_WITHDRAW = (6012, "No stake available for withdrawal.")

    def __init__(self, code: int, text: str) -> None:
        self.code = code
        self._text = text

    def message(self) -> str:
        """Return the human-readable message for this error."""
        return self._text


class StakingError(Exception):
    """Raised when an instruction is rejected by the program."""

    def __init__(self, error: RichieError) -> None:
        super().__init__(error.message())
        self.error = error

    @property
    def code(self) -> int:
        return self.error.code