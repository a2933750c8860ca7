import sys
from functools import wraps
from pathlib import Path
from typing import Union

from scripts.network_context import NETWORK_CONFIG


def is_live(chain_id) -> bool:
    entry = NETWORK_CONFIG.get(int(chain_id))
    return entry is None or entry.get("live", True)


def log(message):
    print(message)


def abort(reason, code=1):
    print(f"error: {reason}", file=sys.stderr)
    sys.exit(code)


def read_seed_content(path: Union[str, Path]) -> str:
    return Path(path).read_text(encoding="utf-8")


def with_deployed(Contract, default_address):
    """Call ``f`` with ``Contract`` at the given address, or at ``default_address()``."""

    def wrapped(f):
        @wraps(f)
        def wrapper(address=None, *args, **kwargs):
            if address is None:
                address = default_address()
            if address is None:
                abort(f"{Contract._name} not deployed")
            return f(Contract.at(address), *args, **kwargs)

        return wrapper

    return wrapped
