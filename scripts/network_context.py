from typing import Any, Dict, NamedTuple, Union

from scripts.errors import ConfigurationError

# chain id -> network settings. identities are either an index into the
# unlocked development accounts or an alias in brownie's account store
NETWORK_CONFIG: Dict[int, Dict[str, Any]] = {
    1337: {"name": "development", "live": False, "deployer": 0},
    31337: {"name": "anvil", "live": False, "deployer": 0},
    1: {"name": "mainnet", "live": True, "deployer": "mainnet-master"},
    11155111: {"name": "sepolia", "live": True, "deployer": "sepolia-deployer"},
    137: {"name": "polygon-main", "live": True, "deployer": "polygon-master"},
}


class NetworkContext(NamedTuple):
    chain_id: int
    network_name: str
    deployer: Any
    minter: Any
    live: bool


def _load_identity(accounts, identity, chain_id):
    if isinstance(identity, int):
        try:
            return accounts[identity]
        except IndexError:
            raise ConfigurationError(
                f"account #{identity} not available on chain {chain_id}"
            ) from None
    try:
        return accounts.load(identity)
    except FileNotFoundError:
        raise ConfigurationError(
            f"account '{identity}' not found, add it with `brownie accounts new {identity}`"
        ) from None


def resolve_network_context(
    chain_id: Union[int, str], accounts, network_config=None
) -> NetworkContext:
    if network_config is None:
        network_config = NETWORK_CONFIG
    try:
        chain_id = int(chain_id)
    except (TypeError, ValueError):
        raise ConfigurationError(f"invalid chain id {chain_id!r}") from None

    entry = network_config.get(chain_id)
    if entry is None:
        raise ConfigurationError(f"chain id {chain_id} not yet supported")
    if not entry.get("name"):
        raise ConfigurationError(f"no network name configured for chain id {chain_id}")

    deployer = _load_identity(accounts, entry["deployer"], chain_id)
    minter_identity = entry.get("minter", entry["deployer"])
    if minter_identity == entry["deployer"]:
        minter = deployer
    else:
        minter = _load_identity(accounts, minter_identity, chain_id)

    return NetworkContext(
        chain_id=chain_id,
        network_name=entry["name"],
        deployer=deployer,
        minter=minter,
        live=entry.get("live", True),
    )
