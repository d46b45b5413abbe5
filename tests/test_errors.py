import pytest

from richie.errors import RichieError, StakingError


def test_messages_match_the_program():
    assert RichieError.UNAUTHORIZED.message() == "UnAuthorized."
    assert RichieError.INVALID_LOCK_PERIOD.message() == "Invalid lock period"
    assert RichieError.UNFINISHED_EPOCH.message() == "The epoch is not finished yet."
    assert RichieError.NOTHING_TO_WITHDRAW.message() == "No stake available for withdrawal."


def test_every_error_has_a_distinct_message():
    messages = [str(StakingError(error)) for error in list(RichieError)]
    assert len(messages) == 13
    assert len(set(messages)) == len(messages)
    assert "Too many multipliers provided" in messages
    assert "The reward was already calculated." in messages


def test_staking_error_carries_error_and_message():
    exc = StakingError(RichieError.NO_REWARD)
    assert exc.error is RichieError.NO_REWARD
    assert str(exc) == "No reward to claim."


def test_staking_error_is_an_exception_with_its_message():
    exc = StakingError(RichieError.EPOCH_TOO_SOON)
    assert isinstance(exc, Exception)
    assert str(exc) == "Epoch duration has not passed yet."
    assert exc.error is RichieError.EPOCH_TOO_SOON


@pytest.mark.parametrize("error", list(RichieError))
def test_every_error_round_trips_through_exception(error):
    exc = StakingError(error)
    assert str(exc) == error.message()
    assert exc.error is error