"""
Provider-side GelatoCore calls: funding, task specs, executor, modules.
"""

import json

from gelato_tasks.abi import get_function_abi, normalize_args
from gelato_tasks.chain import (
    ADDRESS_ZERO,
    connect,
    get_signer,
    instantiate_contract,
    parse_ether,
    send_transaction,
)
from gelato_tasks.errors import ConfigError
from gelato_tasks.logger import get_logger
from gelato_tasks.tasks import flag, param, run, task

logger = get_logger(__name__)

PROVIDER_PARAMS = (
    param(
        "--providerindex",
        type=int,
        default=2,
        help="index of user account generated by mnemonic to fetch provider address",
    ),
    param("--gelatocoreaddress", help="Provide this if not in bre-config"),
    flag("--events", help="Logs parsed Event Logs to stdout"),
    flag("--log", help="Logs return values to stdout"),
    flag("--confirm", help="Print the transaction and ask before sending it"),
)


def call_gelato_core(network, function_name, inputs, signer, gelatocoreaddress=None,
                     value=0, events=False, log=False, confirm=False, web3=None):
    """Send GelatoCore.<function_name>(*inputs) from `signer`, return the tx hash."""
    if web3 is None:
        web3 = connect(network)
    gelato_core = instantiate_contract(web3, network, "GelatoCore", gelatocoreaddress)

    fn_abi = get_function_abi(gelato_core.abi, function_name, len(inputs))
    args = normalize_args(fn_abi, inputs)
    fn = getattr(gelato_core.functions, function_name)(*args)
    tx_hash, receipt = send_transaction(web3, fn, signer, network, value=value, confirm=confirm)

    if log:
        print(f"\n\ntxHash {function_name}: {tx_hash}")

    if events:
        run(
            "event-getparsedlogsallevents",
            network=network,
            contractname="GelatoCore",
            contractaddress=gelato_core.address,
            blockhash=web3.to_hex(receipt["blockHash"]),
            txhash=tx_hash,
            log=True,
            web3=web3,
        )
    return tx_hash


@task(
    "gc-multiprovide",
    "Sends tx and --funds to GelatoCore.multiProvide() on [--network]",
    param("--funds", default="0", help="The amount of ETH funds to provide"),
    param("--gelatoexecutor", default=ADDRESS_ZERO, help="The provider's assigned gelatoExecutor"),
    param("--taskspecs", type=json.loads, default=[], help="Already created TaskSpecs (JSON)"),
    param("--modules", type=json.loads, default=[], help="Gelato Provider Modules (JSON)"),
    *PROVIDER_PARAMS,
    web3=None,
)
def multi_provide(network, funds, gelatoexecutor, taskspecs, modules, providerindex,
                  gelatocoreaddress, events, log, confirm, web3=None):
    # Gelato Provider is the 3rd signer account by default
    gelato_provider = get_signer(providerindex)

    if log:
        print("\n gc-multiprovide TaskArgs:\n", {
            "network": network,
            "funds": funds,
            "gelatoexecutor": gelatoexecutor,
            "taskspecs": taskspecs,
            "modules": modules,
            "providerindex": providerindex,
            "provider": gelato_provider.address,
        })

    # multiProvide(address _executor, TaskSpec[] _taskSpecs, IGelatoProviderModule[] _modules)
    return call_gelato_core(
        network,
        "multiProvide",
        [gelatoexecutor, taskspecs, modules],
        gelato_provider,
        gelatocoreaddress=gelatocoreaddress,
        value=parse_ether(funds),
        events=events,
        log=log,
        confirm=confirm,
        web3=web3,
    )


@task(
    "gc-providefunds",
    "Sends tx and --funds to GelatoCore.provideFunds() on [--network]",
    param("--funds", required=True, help="The amount of ETH funds to provide"),
    param("--provider", help="Provider to credit, defaults to the signer"),
    *PROVIDER_PARAMS,
    web3=None,
)
def provide_funds(network, funds, provider, providerindex, gelatocoreaddress,
                  events, log, confirm, web3=None):
    signer = get_signer(providerindex)
    value = parse_ether(funds)
    if value == 0:
        raise ConfigError("gc-providefunds: --funds must be greater than 0")
    if provider is None:
        provider = signer.address
    logger.info(f"providing {funds} ETH for {provider}")
    return call_gelato_core(
        network,
        "provideFunds",
        [provider],
        signer,
        gelatocoreaddress=gelatocoreaddress,
        value=value,
        events=events,
        log=log,
        confirm=confirm,
        web3=web3,
    )


@task(
    "gc-unprovidefunds",
    "Withdraws --withdrawamount ETH of the provider's funds from GelatoCore on [--network]",
    param("--withdrawamount", required=True, help="The amount of ETH to withdraw"),
    *PROVIDER_PARAMS,
    web3=None,
)
def unprovide_funds(network, withdrawamount, providerindex, gelatocoreaddress,
                    events, log, confirm, web3=None):
    signer = get_signer(providerindex)
    logger.info(f"unproviding {withdrawamount} ETH for {signer.address}")
    return call_gelato_core(
        network,
        "unprovideFunds",
        [parse_ether(withdrawamount)],
        signer,
        gelatocoreaddress=gelatocoreaddress,
        events=events,
        log=log,
        confirm=confirm,
        web3=web3,
    )
