from pathlib import Path

import pytest

from scripts.binder import bind_contract
from scripts.deployer import deploy_artifact

STAR_SVG_PATH = Path(__file__).resolve().parent.parent / "images" / "star.svg"

SAMPLE_ADDRESS = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"


@pytest.fixture(autouse=True)
def isolation_setup(fn_isolation):
    pass


@pytest.fixture(scope="session")
def admin(accounts):
    return accounts[0]


@pytest.fixture(scope="session")
def alice(accounts):
    return accounts[1]


@pytest.fixture(scope="session")
def bob(accounts):
    return accounts[2]


@pytest.fixture(scope="module")
def svg_nft_record(admin, SVGNFT):
    return deploy_artifact(SVGNFT, admin)


@pytest.fixture(scope="module")
def svg_nft(svg_nft_record, alice):
    return bind_contract(svg_nft_record, alice)


@pytest.fixture(scope="session")
def star_svg():
    return STAR_SVG_PATH.read_text(encoding="utf-8")


class FakeDeployedContract:
    def __init__(self, address):
        self.address = address
        self.tx = None


class FakeAccount:
    """Signing identity that records deployments instead of sending them."""

    def __init__(self, address=SAMPLE_ADDRESS, deploy_error=None, deployed_address=SAMPLE_ADDRESS):
        self.address = address
        self.deploy_error = deploy_error
        self.deployed_address = deployed_address
        self.deployed = []

    def deploy(self, container, *args):
        self.deployed.append(container)
        if self.deploy_error is not None:
            raise self.deploy_error
        return FakeDeployedContract(self.deployed_address)


class FakeAccounts(list):
    def __init__(self, accounts, aliases=None):
        super().__init__(accounts)
        self.aliases = aliases or {}

    def load(self, alias):
        if alias not in self.aliases:
            raise FileNotFoundError(f"Cannot find {alias}")
        return self.aliases[alias]


class FakeContainer:
    _name = "SVGNFT"
    abi = [{"type": "function", "name": "create"}]


@pytest.fixture
def fake_account():
    return FakeAccount()


@pytest.fixture
def fake_accounts(fake_account):
    return FakeAccounts([fake_account, FakeAccount()])
