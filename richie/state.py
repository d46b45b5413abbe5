"""Account records kept by the staking program."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from .constants import DEFAULT_PUBKEY


@dataclass
class Config:
    """Global settings and running totals."""

    MAX_MULTIPLIERS: ClassVar[int] = 5
    LEN: ClassVar[int] = (
        8  # discriminator
        + 32  # admin
        + 8  # apr_bps
        + 8  # epoch_duration
        + 8  # last_epoch_time
        + 32  # stake_token_mint
        + 32  # stake_vault
        + 32  # reward_token_mint
        + 32  # reward_vault
        + 8  # total_staked
        + 8  # index
        + 4
        + 8 * MAX_MULTIPLIERS  # multiplier list
    )

    admin: str = DEFAULT_PUBKEY
    apr_bps: int = 0
    epoch_duration: int = 0
    last_epoch_time: int = 0
    stake_token_mint: str = DEFAULT_PUBKEY
    stake_vault: str = DEFAULT_PUBKEY
    reward_token_mint: str = DEFAULT_PUBKEY
    reward_vault: str = DEFAULT_PUBKEY
    total_staked: int = 0
    total_curve: int = 0
    index: int = 0
    multiplier: list[int] = field(default_factory=list)


@dataclass
class StakeEntry:
    """One deposit made by a user."""

    amount: int
    last_staked_epoch_index: int
    lock_period: int
    multiplier: int
    base_curve: int
    boosted_curve: int
    calculated_index: int = 0


@dataclass
class UserStake:
    """A user's deposits and the reward owed to them."""

    MAX_ENTRIES: ClassVar[int] = 20
    LEN: ClassVar[int] = 32 + 4 + (8 + 8 + 1 + 8 + 8 + 8) * MAX_ENTRIES + 8

    owner: str = DEFAULT_PUBKEY
    stake_entries: list[StakeEntry] = field(default_factory=list)
    pending_reward: int = 0


@dataclass
class Stakes:
    """Registry of every user stake account."""

    MAX_USERS: ClassVar[int] = 300
    LEN: ClassVar[int] = 4 + 32 * MAX_USERS

    list: list[str] = field(default_factory=list)


@dataclass
class Epoch:
    """A staking period and the reward it distributes."""

    LEN: ClassVar[int] = 8 + 8 + 8 + 8 + 8 + 8 + 8 + 1

    index: int = 0
    staked_start_time: int = 0
    stake_duration: int = 0
    staked_end_time: int = 0
    reward: int = 0
    total_curve: int = 0
    total_staked_amount: int = 0
    claimable: bool = False