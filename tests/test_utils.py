import pytest

from scripts.deployer import deploy_artifact
from scripts.utils import abort, is_live, read_seed_content, with_deployed
from tests.conftest import STAR_SVG_PATH


@pytest.mark.parametrize(
    "chain_id,live",
    [(1337, False), ("31337", False), (1, True), (137, True), (424242, True)],
)
def test_is_live(chain_id, live):
    assert is_live(chain_id) is live


def test_read_seed_content(tmp_path):
    seed = tmp_path / "seed.svg"
    seed.write_text("<svg>é</svg>", encoding="utf-8")
    assert read_seed_content(seed) == "<svg>é</svg>"
    assert read_seed_content(str(STAR_SVG_PATH)).startswith("<svg")


def test_abort(capsys):
    with pytest.raises(SystemExit) as exc_info:
        abort("SVGNFT not deployed", code=2)
    assert exc_info.value.code == 2
    assert capsys.readouterr().err == "error: SVGNFT not deployed\n"


def test_with_deployed(admin, SVGNFT):
    first = deploy_artifact(SVGNFT, admin)
    recorded = deploy_artifact(SVGNFT, admin)

    @with_deployed(SVGNFT, lambda: recorded.address)
    def address_of(svg_nft):
        return svg_nft.address

    assert address_of() == recorded.address
    assert address_of(first.address) == first.address


def test_with_deployed_without_record(capsys, SVGNFT):
    @with_deployed(SVGNFT, lambda: None)
    def address_of(svg_nft):
        return svg_nft.address

    with pytest.raises(SystemExit) as exc_info:
        address_of()
    assert exc_info.value.code == 1
    assert "SVGNFT not deployed" in capsys.readouterr().err
