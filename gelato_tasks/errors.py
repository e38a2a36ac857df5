class GelatoTaskError(Exception):
    pass


class ConfigError(GelatoTaskError):
    """A network, address book entry, contract or ABI could not be resolved."""


class ChainError(GelatoTaskError):
    """The node could not be reached or did not answer as expected."""


class TransactionReverted(GelatoTaskError):
    def __init__(self, tx_hash, receipt=None):
        super().__init__(f"transaction {tx_hash} reverted")
        self.tx_hash = tx_hash
        self.receipt = receipt


class Aborted(GelatoTaskError):
    """User declined the confirmation prompt."""
