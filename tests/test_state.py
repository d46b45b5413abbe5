from richie.constants import DEFAULT_PUBKEY
from richie.state import Config, Epoch, StakeEntry, Stakes, UserStake


def test_config_defaults():
    config = Config()
    assert config.admin == DEFAULT_PUBKEY
    assert config.reward_vault == DEFAULT_PUBKEY
    assert config.total_staked == 0
    assert config.index == 0
    assert config.multiplier == []


def test_config_multiplier_lists_are_independent():
    first = Config()
    second = Config()
    first.multiplier.append(100)
    assert second.multiplier == []


def test_account_sizes():
    assert Config().LEN == 252
    assert Epoch().LEN == 57


def test_config_size_grows_with_multiplier_capacity():
    config = Config()
    assert config.MAX_MULTIPLIERS == 5
    assert config.LEN >= 4 + 8 * config.MAX_MULTIPLIERS


def test_stake_entry_defaults_calculated_index():
    entry = StakeEntry(
        amount=10,
        last_staked_epoch_index=2,
        lock_period=4,
        multiplier=150,
        base_curve=70,
        boosted_curve=105,
    )
    assert entry.calculated_index == 0
    assert entry.lock_period == 4
    assert entry.boosted_curve == 105


def test_user_stake_defaults_and_independence():
    first = UserStake()
    second = UserStake()
    first.stake_entries.append(StakeEntry(1, 1, 1, 100, 1, 1))
    assert second.stake_entries == []
    assert second.pending_reward == 0
    assert second.owner == DEFAULT_PUBKEY


def test_stakes_lists_are_independent():
    first = Stakes()
    second = Stakes()
    first.list.append("user:alice")
    assert second.list == []


def test_epoch_defaults():
    epoch = Epoch()
    assert epoch.claimable is False
    assert epoch.reward == 0
    assert epoch.staked_end_time == 0