import json
from pathlib import Path
from typing import Callable, List, NamedTuple, Optional

from brownie.network.transaction import Status
from eth_utils import is_checksum_address

from scripts.errors import NETWORK_ERRORS, DeploymentError
from scripts.utils import log


class DeploymentRecord(NamedTuple):
    contract_name: str
    address: str
    abi: List[dict]
    deployer: str
    transaction_id: Optional[str] = None


class DeploymentStore:
    """Deployments of one network, one JSON file per contract name.

    Mirrors the ``deployments/<network>/<Contract>.json`` layout so that
    re-running against a persistent network reuses what is already there.
    """

    def __init__(self, directory):
        self.directory = Path(directory)

    def _path(self, contract_name: str) -> Path:
        return self.directory / f"{contract_name}.json"

    def read(self, contract_name: str) -> Optional[DeploymentRecord]:
        path = self._path(contract_name)
        if not path.exists():
            return None
        try:
            with path.open() as f:
                data = json.load(f)
            record = DeploymentRecord(
                contract_name=contract_name,
                address=str(data["address"]),
                abi=list(data["abi"]),
                deployer=str(data["deployer"]),
                transaction_id=data.get("transactionHash"),
            )
        except (ValueError, TypeError, KeyError) as ex:
            raise DeploymentError(f"unreadable deployment record {path}: {ex!r}") from ex
        if data["deployer"] is None or not is_checksum_address(record.address):
            raise DeploymentError(f"unreadable deployment record {path}: invalid address or deployer")
        return record

    def lookup(self, contract_name: str, deployer: str) -> Optional[DeploymentRecord]:
        record = self.read(contract_name)
        if record is None or record.deployer.lower() != deployer.lower():
            return None
        return record

    def save(self, record: DeploymentRecord):
        self.directory.mkdir(parents=True, exist_ok=True)
        data = {
            "address": record.address,
            "deployer": record.deployer,
            "transactionHash": record.transaction_id,
            "abi": record.abi,
        }
        with self._path(record.contract_name).open("w") as f:
            json.dump(data, f, indent=2)


def _has_code(code_at, address) -> bool:
    try:
        return len(code_at(address)) > 0
    except NETWORK_ERRORS as ex:
        raise DeploymentError(f"could not check code at {address}: {ex}") from ex


def deploy_artifact(
    container,
    deployer,
    store: Optional[DeploymentStore] = None,
    code_at: Optional[Callable] = None,
) -> DeploymentRecord:
    name = container._name
    deployer_address = str(deployer.address)

    if store is not None:
        existing = store.lookup(name, deployer_address)
        if existing is not None and (code_at is None or _has_code(code_at, existing.address)):
            log(f"reusing {name} deployed at {existing.address}")
            return existing

    try:
        contract = deployer.deploy(container)
    except NETWORK_ERRORS as ex:
        raise DeploymentError(f"{name} deployment failed: {ex}") from ex

    # brownie returns the receipt instead of raising when the deployment was
    # dropped or left no code behind
    if not hasattr(contract, "address"):
        status = Status(contract.status)
        outcome = status.name.lower() if status != Status.Confirmed else "left no contract code"
        raise DeploymentError(f"{name} deployment {outcome}: {contract.txid}")

    address = str(contract.address)
    if not is_checksum_address(address):
        raise DeploymentError(f"{name} deployment returned invalid address {address!r}")

    tx = getattr(contract, "tx", None)
    record = DeploymentRecord(
        contract_name=name,
        address=address,
        abi=container.abi,
        deployer=deployer_address,
        transaction_id=tx.txid if tx is not None else None,
    )
    if store is not None:
        store.save(record)

    log(f"You have deployed an NFT contract to {address}")
    return record
