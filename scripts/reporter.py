import base64
import binascii
import json
from typing import NamedTuple

from scripts.errors import NETWORK_ERRORS, ReadError
from scripts.utils import log

VERIFY_COMMAND = "brownie run scripts/02_verify_svgnft.py verify --network {network} {address}"

METADATA_PREFIX = "data:application/json;base64,"
IMAGE_PREFIX = "data:image/svg+xml;base64,"


class Report(NamedTuple):
    address: str
    verification_command: str
    token_index: int
    token_uri: str


def verification_command(network_name, address, template=VERIFY_COMMAND):
    return template.format(network=network_name, address=address)


def fetch_token_uri(handle, receipt):
    if not receipt.confirmed:
        raise ValueError(f"mint {receipt.transaction_id} is not confirmed yet")
    try:
        return handle.contract.tokenURI(receipt.token_index)
    except NETWORK_ERRORS as ex:
        raise ReadError(
            f"could not read tokenURI({receipt.token_index}): {ex}",
            handle.address,
            receipt.token_index,
            receipt,
        ) from ex


def report_result(handle, receipt, network_name, template=VERIFY_COMMAND):
    token_uri = fetch_token_uri(handle, receipt)
    log(f"token URI: {token_uri}")
    return Report(
        address=handle.address,
        verification_command=verification_command(network_name, handle.address, template),
        token_index=receipt.token_index,
        token_uri=token_uri,
    )


def _decode_data_uri(uri, prefix):
    if not uri.startswith(prefix):
        raise ValueError(f"expected a {prefix!r} URI")
    try:
        return base64.b64decode(uri[len(prefix):], validate=True)
    except binascii.Error as ex:
        raise ValueError(f"invalid base64 payload: {ex}") from ex


def decode_token_uri(token_uri):
    """Return the SVG markup embedded in an on-chain token URI."""
    metadata = json.loads(_decode_data_uri(token_uri, METADATA_PREFIX))
    if "image" not in metadata:
        raise ValueError("token metadata has no image")
    return _decode_data_uri(metadata["image"], IMAGE_PREFIX).decode("utf-8")
