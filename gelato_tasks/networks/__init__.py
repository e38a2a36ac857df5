"""
Per-network deployment tables: contract names, address books, deployments.
"""

import copy
import json

from gelato_tasks import config
from gelato_tasks.errors import ConfigError
from gelato_tasks.networks.kovan.address_book import address_book as kovan_address_book
from gelato_tasks.networks.kovan.contracts import contracts as kovan_contracts
from gelato_tasks.networks.rinkeby.address_book import address_book as rinkeby_address_book
from gelato_tasks.networks.rinkeby.contracts import contracts as rinkeby_contracts

#configs
NETWORKS = {
    "rinkeby": {
        "chain_id": 4,
        "url": "https://rinkeby.infura.io/v3/{infura_id}",
        "gas": 4000000,
        "contracts": rinkeby_contracts,
        "address_book": rinkeby_address_book,
        "deployments": {},
    },
    "kovan": {
        "chain_id": 42,
        "url": "https://kovan.infura.io/v3/{infura_id}",
        "gas": 4000000,
        "contracts": kovan_contracts,
        "address_book": kovan_address_book,
        "deployments": {},
    },
}


def load_overlay(path):
    """
    Read the address book overlay file.

    Layout: {"<network>": {"addressBook": {"<category>": {"<name>": "0x.."}},
                           "deployments": {"<ContractName>": "0x.."}}}
    """
    if not path:
        return {}
    try:
        with open(path, "r") as file:
            return json.load(file)
    except FileNotFoundError:
        raise ConfigError(f"address book overlay missing: {path}")
    except json.JSONDecodeError as e:
        raise ConfigError(f"address book overlay {path}: JSON decode error: {e}")


def get_network(name, overlay_path=None):
    """Return a private copy of the network table with the overlay merged in."""
    if name not in NETWORKS:
        raise ConfigError(f"unknown network {name!r}, choose from {sorted(NETWORKS)}")
    network = copy.deepcopy(NETWORKS[name])
    network["name"] = name

    if overlay_path is None:
        overlay_path = config.ADDRESS_BOOK_OVERLAY
    extra = load_overlay(overlay_path).get(name, {})
    for category, entries in extra.get("addressBook", {}).items():
        network["address_book"].setdefault(category, {}).update(entries)
    network["deployments"].update(extra.get("deployments", {}))
    return network


def rpc_url(network):
    url = config.rpc_url_override(network["name"])
    if url:
        return url
    if not config.INFURA_ID:
        raise ConfigError(
            f"INFURA_ID or {network['name'].upper()}_RPC_URL required for {network['name']}"
        )
    return network["url"].format(infura_id=config.INFURA_ID)
