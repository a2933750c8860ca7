from typing import Any, List, NamedTuple

from brownie import Contract


class ContractHandle(NamedTuple):
    address: str
    abi: List[dict]
    signer: Any
    contract: Any


def bind_contract(record, signer, factory=None):
    # the recorded ABI is the interface, no second lookup by contract name
    if not record.address or not record.abi:
        raise ValueError(f"incomplete deployment record for {record.contract_name}")
    if factory is None:
        factory = Contract.from_abi
    contract = factory(record.contract_name, record.address, record.abi, owner=signer)
    return ContractHandle(
        address=record.address, abi=record.abi, signer=signer, contract=contract
    )
