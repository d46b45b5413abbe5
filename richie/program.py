"""The staking program: vault setup, epochs, staking and reward accounting."""

from __future__ import annotations

from collections.abc import Sequence

from .constants import DEFAULT_PUBKEY, REWARD, USER, VAULT
from .errors import RichieError, StakingError
from .state import Config, Epoch, StakeEntry, Stakes, UserStake

U64_MAX = 2**64 - 1
I64_MIN = -(2**63)
I64_MAX = 2**63 - 1

PRE_EPOCH_DURATION = 6 * 60 * 60
DEFAULT_MULTIPLIERS = (100, 120, 150, 200, 300)

_LOCK_PERIOD_SLOTS = {1: 0, 2: 1, 4: 2, 8: 3, 16: 4}


def _u64(value: int) -> int:
    if not 0 <= value <= U64_MAX:
        raise OverflowError("u64 arithmetic overflow")
    return value


def _i64(value: int) -> int:
    if not I64_MIN <= value <= I64_MAX:
        raise OverflowError("i64 arithmetic overflow")
    return value


def _as_u64(value: int) -> int:
    """Reinterpret an integer as an unsigned 64-bit value, wrapping."""
    return value % (U64_MAX + 1)


def _check_int(name: str, value: int, low: int, high: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer")
    if not low <= value <= high:
        raise ValueError(f"{name} out of range: {value}")


def _require(condition: bool, error: RichieError) -> None:
    if not condition:
        raise StakingError(error)


def _user_stake_key(user: str) -> str:
    return f"{USER}:{user}"


def _share(curve: int, reward: int, total_curve: int) -> int:
    if total_curve == 0:
        return 0
    return _as_u64(curve * reward // total_curve)


class TokenLedger:
    """Token balances held by named accounts."""

    def __init__(self) -> None:
        self._balances: dict[str, int] = {}

    def balance(self, account: str) -> int:
        return self._balances.get(account, 0)

    def mint_to(self, account: str, amount: int) -> None:
        _check_int("amount", amount, 0, U64_MAX)
        self._balances[account] = _u64(self.balance(account) + amount)

    def transfer(self, source: str, destination: str, amount: int) -> None:
        """Move tokens between accounts; raise ValueError if funds are short."""
        _check_int("amount", amount, 0, U64_MAX)
        available = self.balance(source)
        if available < amount:
            raise ValueError(
                f"insufficient funds in {source!r}: {available} < {amount}"
            )
        new_destination = (
            available if source == destination else _u64(self.balance(destination) + amount)
        )
        self._balances[source] = available - amount
        self._balances[destination] = new_destination


def get_multiplier(config: Config, lock_period: int) -> int:
    """Return the configured multiplier for a lock period of 1, 2, 4, 8 or 16 epochs."""
    slot = _LOCK_PERIOD_SLOTS.get(lock_period)
    if slot is None or slot >= len(config.multiplier):
        raise StakingError(RichieError.INVALID_LOCK_PERIOD)
    return config.multiplier[slot]


class StakingProgram:
    """Staking state machine; each instruction either applies fully or not at all."""

    stake_vault = VAULT
    reward_vault = REWARD

    def __init__(self, ledger: TokenLedger | None = None) -> None:
        self.ledger = ledger if ledger is not None else TokenLedger()
        self.config: Config | None = None
        self.stakes: Stakes | None = None
        self._epochs: dict[int, Epoch] = {}
        self._user_stakes: dict[str, UserStake] = {}

    def _require_config(self) -> Config:
        if self.config is None:
            raise LookupError("config account is not initialized")
        return self.config

    def _require_stakes(self) -> Stakes:
        if self.stakes is None:
            raise LookupError("stakes account is not initialized")
        return self.stakes

    def epoch(self, index: int) -> Epoch:
        try:
            return self._epochs[index]
        except KeyError:
            raise KeyError(f"epoch {index} is not initialized") from None

    def user_stake(self, user: str) -> UserStake:
        try:
            return self._user_stakes[_user_stake_key(user)]
        except KeyError:
            raise KeyError(f"no stake account for {user!r}") from None

    def initialize_stake_vault(
        self, admin: str, stake_token_mint: str, apr_bps: int, epoch_duration: int, now: int
    ) -> Config:
        _check_int("apr_bps", apr_bps, 0, U64_MAX)
        _check_int("epoch_duration", epoch_duration, I64_MIN, I64_MAX)
        _check_int("now", now, I64_MIN, I64_MAX)
        if self.config is not None:
            raise ValueError("config account already exists")
        self.config = Config(
            admin=admin,
            apr_bps=apr_bps,
            epoch_duration=epoch_duration,
            last_epoch_time=now,
            stake_token_mint=stake_token_mint,
            stake_vault=self.stake_vault,
            reward_token_mint=DEFAULT_PUBKEY,
            reward_vault=DEFAULT_PUBKEY,
            total_staked=0,
            index=0,
            multiplier=list(DEFAULT_MULTIPLIERS),
        )
        return self.config

    def initialize_reward_vault(self, admin: str, reward_mint: str) -> Config:
        config = self._require_config()
        if self.stakes is not None:
            raise ValueError("stakes account already exists")
        _require(admin == config.admin, RichieError.UNAUTHORIZED)
        self.stakes = Stakes()
        config.reward_token_mint = reward_mint
        config.reward_vault = self.reward_vault
        return config

    def update_epoch_duration(self, admin: str, duration: int) -> None:
        _check_int("duration", duration, I64_MIN, I64_MAX)
        config = self._require_config()
        _require(admin == config.admin, RichieError.UNAUTHORIZED)
        config.epoch_duration = duration

    def update_multiplier(self, admin: str, new_multiplier: Sequence[int]) -> None:
        config = self._require_config()
        values = list(new_multiplier)
        for value in values:
            _check_int("multiplier", value, 0, U64_MAX)
        _require(admin == config.admin, RichieError.UNAUTHORIZED)
        _require(len(values) <= Config.MAX_MULTIPLIERS, RichieError.TOO_MANY_MULTIPLIERS)
        config.multiplier = values

    def toggle(
        self, owner: str, index: int, reward_amount: int, source: str, now: int
    ) -> Epoch:
        """Open epoch ``index``; epoch 0 is the pre-epoch staking window."""
        _check_int("index", index, 0, U64_MAX)
        _check_int("reward_amount", reward_amount, 0, U64_MAX)
        _check_int("now", now, I64_MIN, I64_MAX)
        config = self._require_config()
        if index in self._epochs:
            raise ValueError(f"epoch {index} already exists")
        if config.reward_vault == DEFAULT_PUBKEY:
            raise LookupError("reward vault is not initialized")
        _require(owner == config.admin, RichieError.UNAUTHORIZED)

        if index == 0:
            _require(reward_amount == 0, RichieError.INVALID_REWARD_AMOUNT)
            _require(index == config.index, RichieError.INVALID_EPOCH_INDEX)
            duration = PRE_EPOCH_DURATION
        else:
            _require(reward_amount > 0, RichieError.INVALID_REWARD_AMOUNT)
            _require(index == _u64(config.index + 1), RichieError.INVALID_EPOCH_INDEX)
            duration = config.epoch_duration

        end_time = _i64(now + duration)
        total_staked = config.total_staked
        if index == 1:
            total_curve = _u64(total_staked * _as_u64(duration))
        else:
            total_curve = config.total_curve

        if index > 0:
            self.ledger.transfer(source, self.reward_vault, reward_amount)
            config.index += 1

        epoch = Epoch(
            index=index,
            staked_start_time=now,
            stake_duration=duration,
            staked_end_time=end_time,
            reward=reward_amount,
            total_curve=total_curve,
            total_staked_amount=total_staked,
        )
        self._epochs[index] = epoch
        config.total_curve = 0
        return epoch

    def stake(
        self, user: str, index: int, amount: int, lock_period: int, source: str, now: int
    ) -> UserStake:
        """Deposit ``amount`` tokens from ``source`` into epoch ``index``."""
        _check_int("index", index, 0, U64_MAX)
        _check_int("amount", amount, 0, U64_MAX)
        _check_int("lock_period", lock_period, 0, 255)
        _check_int("now", now, I64_MIN, I64_MAX)
        config = self._require_config()
        epoch = self.epoch(index)
        stakes = self._require_stakes()
        key = _user_stake_key(user)
        user_stake = self._user_stakes.get(key)
        if user_stake is None:
            user_stake = UserStake()

        if index == 0:
            _require(lock_period == 1, RichieError.INVALID_LOCK_PERIOD)
        else:
            _require(index == config.index, RichieError.INVALID_EPOCH_INDEX)
            window_end = _i64(epoch.staked_start_time + epoch.stake_duration)
            _require(
                epoch.staked_start_time <= now <= window_end,
                RichieError.INVALID_STAKE_TIME,
            )
        _require(index == config.index, RichieError.INVALID_EPOCH_INDEX)

        if index == 0:
            base_curve = boosted_curve = multiplier = 0
        else:
            elapsed = _i64(now - epoch.staked_start_time)
            available_time = _i64(epoch.stake_duration - elapsed)
            multiplier = get_multiplier(config, lock_period)
            base_curve = _u64(amount * _as_u64(available_time))
            boosted_curve = _u64(base_curve * multiplier) // 100

        merge_into = None
        if index == 0:
            merge_into = next(
                (e for e in user_stake.stake_entries if e.last_staked_epoch_index == 0),
                None,
            )
        merged_amount = _u64(merge_into.amount + amount) if merge_into else 0
        if index != 0:
            epoch_curve = _u64(epoch.total_curve + boosted_curve)
            epoch_staked = _u64(epoch.total_staked_amount + amount)
        total_staked = _u64(config.total_staked + amount)

        self.ledger.transfer(source, self.stake_vault, amount)

        if not user_stake.stake_entries:
            user_stake.owner = user
            stakes.list.append(key)
        if merge_into is not None:
            merge_into.amount = merged_amount
        else:
            user_stake.stake_entries.append(
                StakeEntry(
                    amount=amount,
                    last_staked_epoch_index=index,
                    lock_period=lock_period,
                    multiplier=multiplier,
                    base_curve=base_curve,
                    boosted_curve=boosted_curve,
                    calculated_index=0,
                )
            )
        if index != 0:
            epoch.total_curve = epoch_curve
            epoch.total_staked_amount = epoch_staked
        config.total_staked = total_staked
        self._user_stakes[key] = user_stake
        return user_stake

    def manage_staker_reward(self, admin: str, user: str, index: int, now: int) -> int:
        """Credit ``user`` with their share of finished epoch ``index``.

        Returns the reward computed for the entries processed by this call.
        """
        _check_int("index", index, 0, U64_MAX)
        _check_int("now", now, I64_MIN, I64_MAX)
        config = self._require_config()
        epoch = self.epoch(index)
        user_stake = self.user_stake(user)
        stakes = self._require_stakes()

        _require(_user_stake_key(user) in stakes.list, RichieError.INVALID_USER_STAKE)
        _require(config.index == index, RichieError.INVALID_EPOCH_INDEX)
        _require(admin == config.admin, RichieError.UNAUTHORIZED)
        _require(
            _i64(epoch.staked_start_time + epoch.stake_duration) < now,
            RichieError.UNFINISHED_EPOCH,
        )

        duration = _as_u64(config.epoch_duration)
        reward_sum = 0
        total_curve = config.total_curve
        updates = []
        for entry in user_stake.stake_entries:
            if entry.calculated_index == index:
                continue
            first_epoch = entry.last_staked_epoch_index or 1
            base_curve = _u64(entry.amount * duration)
            if _u64(first_epoch + entry.lock_period) - 1 >= index:
                share = _share(entry.boosted_curve, epoch.reward, epoch.total_curve)
                boosted_curve = _u64(base_curve * entry.multiplier)
            else:
                share = _share(entry.base_curve, epoch.reward, epoch.total_curve)
                boosted_curve = base_curve
            reward_sum = _u64(reward_sum + share)
            total_curve = _u64(total_curve + boosted_curve)
            updates.append((entry, base_curve, boosted_curve))

        for entry, base_curve, boosted_curve in updates:
            entry.base_curve = base_curve
            entry.boosted_curve = boosted_curve
            entry.calculated_index = index
        config.total_curve = total_curve

        if epoch.index != 0:
            user_stake.pending_reward = min(user_stake.pending_reward + reward_sum, U64_MAX)
            epoch.claimable = True
        return reward_sum