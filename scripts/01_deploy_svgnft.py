from brownie import SVGNFT, accounts, config, network, web3  # type: ignore

from scripts.errors import ProvisioningError, ReadError
from scripts.pipeline import DEFAULT_DEPLOYMENTS_DIR, DEFAULT_SEED_PATH, provision
from scripts.reporter import VERIFY_COMMAND
from scripts.utils import abort


def main():
    settings = config.get("svgnft", {})
    try:
        provision(
            network.chain.id,
            SVGNFT,
            accounts,
            seed_path=settings.get("seed_path", DEFAULT_SEED_PATH),
            confirmations=int(settings.get("confirmations", 1)),
            deployments_dir=settings.get("deployments_dir", DEFAULT_DEPLOYMENTS_DIR),
            code_at=web3.eth.get_code,
            verify_template=settings.get("verify_command", VERIFY_COMMAND),
        )
    except ReadError as ex:
        abort(
            f"token #{ex.token_index} was minted at {ex.address} "
            f"but its URI could not be read: {ex}"
        )
    except ProvisioningError as ex:
        abort(f"{type(ex).__name__}: {ex}")
