# richie

An in-memory model of an epoch-based staking program. Users stake tokens
into a shared vault, optionally locking them for several epochs to earn a
boosted share. An administrator opens epochs funded with reward tokens and,
after each epoch has ended, settles each staker's share of that epoch's
reward into the staker's pending reward.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `richie.program` – `StakingProgram`, the state machine with its
  instructions; `TokenLedger`, which holds token balances; and
  `get_multiplier(config, lock_period)`.
- `richie.state` – the account records as dataclasses: `Config`, `Epoch`,
  `UserStake`, `StakeEntry` and `Stakes`.
- `richie.errors` – `RichieError`, the enumeration of rule violations (each
  member has a numeric `code` and a `message()`), and `StakingError`, the
  exception that carries one.
- `richie.constants` – the account seed names and `DEFAULT_PUBKEY`, the
  placeholder key held by unset fields.

## Concepts

- **Epoch 0** is a pre-staking window of six hours. It carries no reward;
  stakes placed in it must use a lock period of 1, and repeated stakes by the
  same user are merged into one entry.
- **Epochs 1, 2, ...** are opened in order by the administrator with
  `toggle`, each funded with a positive reward amount moved from a source
  account into the reward vault, and lasting `epoch_duration` seconds.
- **Lock periods** of 1, 2, 4, 8 or 16 epochs select a multiplier from the
  configuration (default `[100, 120, 150, 200, 300]`, in percent). At most
  five multipliers may be configured with `update_multiplier`.
- **Curves** measure stake weighted by remaining time in the epoch. A
  staker's share of an epoch's reward is their curve times the reward,
  divided by the epoch's total curve.

Times are plain integers (seconds) passed in as `now`; the program keeps no
clock of its own.

## Usage

```python
from richie.program import StakingProgram, TokenLedger

ledger = TokenLedger()
ledger.mint_to("alice-wallet", 1_000)
ledger.mint_to("admin-wallet", 10_000)

program = StakingProgram(ledger)
program.initialize_stake_vault("admin", "stake-mint", apr_bps=500,
                               epoch_duration=86_400, now=0)
program.initialize_reward_vault("admin", "reward-mint")

# Open the pre-staking window and stake during it.
program.toggle("admin", index=0, reward_amount=0, source="admin-wallet", now=0)
program.stake("alice", index=0, amount=500, lock_period=1,
              source="alice-wallet", now=10)

# Open epoch 1 with a reward, stake into it, then settle once it has ended.
program.toggle("admin", index=1, reward_amount=1_000,
               source="admin-wallet", now=100)
program.stake("alice", index=1, amount=200, lock_period=4,
              source="alice-wallet", now=200)
settled = program.manage_staker_reward("admin", "alice", index=1,
                                       now=100 + 86_401)

print(settled, program.user_stake("alice").pending_reward)
print(ledger.balance(program.stake_vault), ledger.balance(program.reward_vault))
```

`program.epoch(index)` and `program.user_stake(user)` return the stored
records and raise `KeyError` when they do not exist.

## Errors

Every rule the program enforces raises `richie.errors.StakingError`, whose
`error` attribute is a member of `richie.errors.RichieError`:

```python
from richie.errors import RichieError, StakingError

try:
    program.update_epoch_duration("mallory", 60)
except StakingError as exc:
    assert exc.error is RichieError.UNAUTHORIZED
    print(exc.code, exc.error.message())
```

Other failures use built-in exceptions: `TypeError` or `ValueError` for
arguments that are not integers or are outside the 64-bit range,
`ValueError` when a ledger account lacks funds or an account is created
twice, `LookupError` when the configuration, stakes registry or reward vault
has not been initialized, and `OverflowError` when a 64-bit total would
overflow. An instruction that fails leaves the state and balances unchanged.

## What this package does not do

- There is no instruction for claiming pending rewards, for withdrawing
  staked tokens, or for the administrator to withdraw tokens from either
  vault; `pending_reward` only accumulates.
- State lives in memory only; nothing is saved to disk.
- There is no command-line interface; the package is used as a library.