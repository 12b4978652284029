from __future__ import annotations


class LedgerStoreError(RuntimeError):
    """Base class for errors raised by the ledger store."""


class ConstraintViolation(LedgerStoreError):
    """A record was rejected on insert: malformed fields or a broken constraint."""


class PersistenceFailure(LedgerStoreError):
    """A token update could not be written."""
