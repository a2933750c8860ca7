from brownie.exceptions import RPCRequestError, VirtualMachineError


class ProvisioningError(Exception):
    """Base class for every failure of the deploy-and-mint sequence."""


class ConfigurationError(ProvisioningError):
    pass


class DeploymentError(ProvisioningError):
    pass


class TransactionError(ProvisioningError):
    def __init__(self, message, transaction_id=None):
        super().__init__(message)
        self.transaction_id = transaction_id


class ReadError(ProvisioningError):
    """The token exists on chain but its metadata could not be read back."""

    def __init__(self, message, address, token_index, receipt=None):
        super().__init__(message)
        self.address = address
        self.token_index = token_index
        self.receipt = receipt


# what brownie and web3 raise when the node rejects a call or cannot be reached
NETWORK_ERRORS = (VirtualMachineError, RPCRequestError, ValueError, OSError)
