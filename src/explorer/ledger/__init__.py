"""Client for the remote ledger node."""
