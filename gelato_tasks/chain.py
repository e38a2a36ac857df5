"""
web3 boundary: node connection, signers, contract handles, transaction
submission and event log parsing.
"""

from decimal import Decimal
from pprint import pformat

from eth_account import Account
from eth_utils import event_abi_to_log_topic, to_checksum_address
from web3 import Web3
from web3.exceptions import TimeExhausted

from gelato_tasks import bre_config, config
from gelato_tasks.abi import load_abi
from gelato_tasks.errors import Aborted, ChainError, ConfigError, TransactionReverted
from gelato_tasks.logger import get_logger
from gelato_tasks.networks import get_network, rpc_url

logger = get_logger(__name__)

ADDRESS_ZERO = "0x0000000000000000000000000000000000000000"


def connect(network):
    url = rpc_url(get_network(network))
    web3 = Web3(Web3.HTTPProvider(url))
    if not web3.is_connected():
        raise ChainError(f"failed to connect {network} chain.")
    logger.debug(f"connected to {network}")
    return web3


def get_signer(index=0):
    """Account number `index` of the configured mnemonic (or the single private key)."""
    if config.MNEMONIC:
        Account.enable_unaudited_hdwallet_features()
        return Account.from_mnemonic(config.MNEMONIC, account_path=f"m/44'/60'/0'/0/{index}")
    if config.PRIVATE_KEY:
        if index:
            logger.warning(f"PRIVATE_KEY set without mnemonic, signer index {index} ignored")
        return Account.from_key(config.PRIVATE_KEY)
    raise ConfigError("no signer: set DEMO_ACCOUNTS_MNEMONIC or PRIVATE_KEY")


def parse_ether(amount):
    """'0.1' -> wei, exact for decimal strings."""
    try:
        ether = Decimal(str(amount))
    except ArithmeticError:
        raise ConfigError(f"invalid ETH amount {amount!r}")
    if not ether.is_finite():
        raise ConfigError(f"invalid ETH amount {amount!r}")
    wei = ether * 10**18
    whole = wei == wei.to_integral_value()
    if not whole:
        # to_wei would silently round it down
        raise ConfigError(f"ETH amount {amount!r} is finer than 1 wei")
    try:
        return Web3.to_wei(ether, "ether")
    except (ArithmeticError, ValueError):
        raise ConfigError(f"invalid ETH amount {amount!r}")


def instantiate_contract(web3, network, contract_name, address=None):
    if contract_name not in bre_config.contracts(network):
        raise ConfigError(f"contract {contract_name!r} not in {network} contracts")
    if address is None:
        address = bre_config.deployment(network, contract_name)
    return web3.eth.contract(address=to_checksum_address(address), abi=load_abi(contract_name))


def send_transaction(web3, fn, signer, network, value=0, confirm=False):
    """
    Build, sign and submit the contract call `fn`, then block until it is mined.

    Returns:
        (tx hash as 0x-hex, receipt)
    """
    table = get_network(network)
    transaction = fn.build_transaction({
        'from': signer.address,
        'nonce': web3.eth.get_transaction_count(signer.address),
        'chainId': table["chain_id"],
        'gas': table["gas"],
        'gasPrice': int(web3.eth.gas_price * config.GAS_PRICE_MULTIPLIER),
        'value': value,
    })

    if confirm:
        print(pformat(transaction))
        if input('continue (y)? ') != 'y':
            raise Aborted("transaction not sent")

    signed_tx = web3.eth.account.sign_transaction(transaction, signer.key)
    tx_hash = web3.eth.send_raw_transaction(signed_tx.raw_transaction)
    tx_hash_hex = web3.to_hex(tx_hash)
    logger.info(f"sent {tx_hash_hex}, waiting for receipt")

    try:
        receipt = web3.eth.wait_for_transaction_receipt(tx_hash, timeout=config.TX_RECEIPT_TIMEOUT)
    except TimeExhausted:
        raise ChainError(
            f"{tx_hash_hex} not mined within {config.TX_RECEIPT_TIMEOUT} sec"
        )

    if receipt["status"] == 0:
        raise TransactionReverted(tx_hash_hex, receipt)
    logger.info(f"{tx_hash_hex} mined in block {receipt['blockNumber']}")
    return tx_hash_hex, receipt


def get_parsed_logs(web3, contract, block_hash, tx_hash):
    """Decode the logs `contract` emitted in transaction `tx_hash`."""
    topics = {
        event_abi_to_log_topic(item): item["name"]
        for item in contract.abi
        if item.get("type") == "event" and not item.get("anonymous")
    }
    logs = web3.eth.get_logs({"blockHash": block_hash, "address": contract.address})

    parsed = []
    for log in logs:
        if web3.to_hex(log["transactionHash"]).lower() != tx_hash.lower():
            continue
        if not log["topics"]:
            continue
        name = topics.get(bytes(log["topics"][0]))
        if name is None:
            logger.debug(f"skipping log with unknown topic {web3.to_hex(log['topics'][0])}")
            continue
        parsed.append(getattr(contract.events, name)().process_log(log))
    return parsed
