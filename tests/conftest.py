"""
Pytest configuration and shared fixtures
"""

import json
import logging
from unittest.mock import MagicMock

import pytest
from eth_account import Account
from hexbytes import HexBytes
from web3 import Web3

from gelato_tasks import config

from constants import DAI, DLETH2X, GELATO_CORE, LUIS, LUIS_PROXY, TEST_MNEMONIC, TEST_PRIVATE_KEY


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Never pick up secrets or overlays from the developer's .env"""
    monkeypatch.setattr(config, "MNEMONIC", "")
    monkeypatch.setattr(config, "PRIVATE_KEY", "")
    monkeypatch.setattr(config, "INFURA_ID", "")
    monkeypatch.setattr(config, "ADDRESS_BOOK_OVERLAY", "")
    monkeypatch.setattr(config, "DEFAULT_NETWORK", "rinkeby")
    yield
    logging.getLogger("gelato_tasks").handlers.clear()


@pytest.fixture
def mnemonic(monkeypatch):
    monkeypatch.setattr(config, "MNEMONIC", TEST_MNEMONIC)
    return TEST_MNEMONIC


@pytest.fixture
def signer():
    return Account.from_key(TEST_PRIVATE_KEY)


@pytest.fixture
def write_overlay(tmp_path, monkeypatch):
    """Writes an address book overlay with the per-developer entries the tasks use"""
    def write(*networks):
        path = tmp_path / "address_book.json"
        path.write_text(json.dumps({
            network: {
                "addressBook": {
                    "EOA": {"luis": LUIS},
                    "userProxy": {"luis": LUIS_PROXY},
                    "erc20": {"DAI": DAI, "dLETH2x": DLETH2X},
                },
                "deployments": {"GelatoCore": GELATO_CORE},
            }
            for network in networks
        }))
        monkeypatch.setattr(config, "ADDRESS_BOOK_OVERLAY", str(path))
        return path
    return write


@pytest.fixture
def overlay(write_overlay):
    return write_overlay("rinkeby")


@pytest.fixture
def mock_web3():
    """web3 client stub; contract handles are MagicMocks carrying the real ABI"""
    web3 = MagicMock()
    web3.to_hex.side_effect = Web3.to_hex
    web3.eth.get_transaction_count.return_value = 7
    web3.eth.gas_price = 10
    web3.eth.account.sign_transaction.return_value = MagicMock(raw_transaction=b"signed")
    web3.eth.send_raw_transaction.return_value = HexBytes("0x" + "ab" * 32)
    web3.eth.wait_for_transaction_receipt.return_value = {
        "status": 1,
        "blockNumber": 42,
        "blockHash": HexBytes("0x" + "cd" * 32),
    }

    def contract(address, abi):
        handle = MagicMock()
        handle.address = address
        handle.abi = abi
        web3.contracts.append(handle)
        return handle

    web3.contracts = []
    web3.eth.contract.side_effect = contract
    return web3
