from pathlib import Path
from typing import NamedTuple, Optional

from scripts.binder import bind_contract
from scripts.deployer import DeploymentRecord, DeploymentStore, deploy_artifact
from scripts.errors import ConfigurationError
from scripts.minting import MintReceipt, mint_token
from scripts.network_context import NetworkContext, resolve_network_context
from scripts.reporter import VERIFY_COMMAND, Report, report_result, verification_command
from scripts.utils import log, read_seed_content

DEFAULT_SEED_PATH = Path("images") / "star.svg"
DEFAULT_DEPLOYMENTS_DIR = Path("deployments")


class ProvisioningResult(NamedTuple):
    context: NetworkContext
    deployment: DeploymentRecord
    receipt: MintReceipt
    report: Report


def provision(
    chain_id,
    container,
    accounts,
    seed_path=DEFAULT_SEED_PATH,
    confirmations: int = 1,
    network_config=None,
    deployments_dir=DEFAULT_DEPLOYMENTS_DIR,
    code_at=None,
    verify_template: str = VERIFY_COMMAND,
) -> ProvisioningResult:
    """Deploy ``container``, mint one token from the seed file and read it back.

    Every step runs once, in order, and its failure stops the run. A
    ``ReadError`` means the token was minted: it carries the mint receipt.
    """
    context = resolve_network_context(chain_id, accounts, network_config)
    try:
        content = read_seed_content(seed_path)
    except (OSError, UnicodeDecodeError) as ex:
        raise ConfigurationError(f"cannot read seed file {seed_path}: {ex}") from ex

    store: Optional[DeploymentStore] = None
    if context.live and deployments_dir is not None:
        store = DeploymentStore(Path(deployments_dir) / context.network_name)

    log("---------------")
    deployment = deploy_artifact(container, context.deployer, store=store, code_at=code_at)
    command = verification_command(context.network_name, deployment.address, verify_template)
    log(f"Verify with:\n {command}")

    handle = bind_contract(deployment, context.minter)
    receipt = mint_token(handle, content, confirmations).unwrap()

    report = report_result(handle, receipt, context.network_name, verify_template)
    return ProvisioningResult(
        context=context, deployment=deployment, receipt=receipt, report=report
    )
