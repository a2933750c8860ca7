from pathlib import Path

from brownie import SVGNFT, config, network  # type: ignore

from scripts.deployer import DeploymentStore
from scripts.network_context import NETWORK_CONFIG
from scripts.pipeline import DEFAULT_DEPLOYMENTS_DIR
from scripts.utils import abort, is_live, log, with_deployed


def recorded_address():
    entry = NETWORK_CONFIG.get(network.chain.id)
    if entry is None:
        return None
    deployments_dir = config.get("svgnft", {}).get("deployments_dir", DEFAULT_DEPLOYMENTS_DIR)
    record = DeploymentStore(Path(deployments_dir) / entry["name"]).read(SVGNFT._name)
    return record.address if record is not None else None


@with_deployed(SVGNFT, recorded_address)
def verify(svg_nft):
    if not is_live(network.chain.id):
        abort(f"cannot verify on {network.show_active()}, not a live network")
    SVGNFT.publish_source(svg_nft)
    log(f"published source of {svg_nft.address}")


def main():
    verify()
