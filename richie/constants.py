"""Account seed names."""

CONFIG = "config"
VAULT = "vault"
USER = "user"
REWARD = "reward"
EPOCH = "epoch"
STAKE = "stake"

DEFAULT_PUBKEY = "11111111111111111111111111111111"