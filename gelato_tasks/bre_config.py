"""
Lookups into the network tables. Every function raises ConfigError when the
requested key is absent.
"""

from gelato_tasks.errors import ConfigError
from gelato_tasks.networks import get_network


def contracts(network):
    return list(get_network(network)["contracts"])


def address_book(network):
    return get_network(network)["address_book"]


def address_book_category(network, category):
    book = address_book(network)
    if category not in book:
        raise ConfigError(f"address book category {category!r} not in {network} address book")
    return book[category]


def address_book_entry(network, category, entry):
    entries = address_book_category(network, category)
    if entry not in entries:
        raise ConfigError(f"no entry {entry!r} in {network} address book category {category!r}")
    return entries[entry]


def deployment(network, contract_name):
    table = get_network(network)
    if contract_name not in table["contracts"]:
        raise ConfigError(f"contract {contract_name!r} not in {network} contracts")
    if contract_name not in table["deployments"]:
        raise ConfigError(f"no deployment of {contract_name} recorded for {network}")
    return table["deployments"][contract_name]


def bre_config(
    network,
    contracts_list=False,
    addressbook=False,
    addressbookcategory=None,
    addressbookentry=None,
    contractname=None,
):
    """Answer exactly one query about a network's configuration."""
    selectors = [
        contracts_list,
        addressbook,
        addressbookcategory is not None,
        contractname is not None,
    ]
    if sum(bool(s) for s in selectors) != 1:
        raise ConfigError(
            "bre-config: choose one of contracts, addressbook, addressbookcategory or contractname"
        )
    if addressbookentry is not None and addressbookcategory is None:
        raise ConfigError("bre-config: addressbookentry requires addressbookcategory")

    if contracts_list:
        return contracts(network)
    if addressbook:
        return address_book(network)
    if addressbookcategory is not None:
        if addressbookentry is not None:
            return address_book_entry(network, addressbookcategory, addressbookentry)
        return address_book_category(network, addressbookcategory)
    return deployment(network, contractname)
