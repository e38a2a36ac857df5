"""
Hard-coded default payloads used when minting executor claims.
"""

from web3 import Web3

from gelato_tasks.tasks import flag, run, task


@task(
    "gc-mint:defaultpayload:ActionBzxPtokenMintWithToken",
    "Returns a hardcoded actionPayloadWithSelector of ActionBzxPtokenMintWithToken",
    flag("--log"),
)
def default_payload_action_bzx_ptoken_mint_with_token(network, log):
    contractname = "ActionBzxPtokenMintWithToken"
    functionname = "action"

    # Params
    def lookup(category, entry):
        return run("bre-config", network=network, addressbookcategory=category, addressbookentry=entry)

    user = lookup("EOA", "luis")
    user_proxy = lookup("userProxy", "luis")
    deposit_token_address = lookup("erc20", "DAI")
    p_token_address = lookup("erc20", "dLETH2x")
    deposit_token_amount = Web3.to_wei(10, "ether")  # 10 DAI, 18 decimals

    # action(_user, _userProxy, _depositTokenAddress, _depositAmount, _pTokenAddress)
    inputs = [
        user,
        user_proxy,
        deposit_token_address,
        deposit_token_amount,
        p_token_address,
    ]
    return run(
        "abi-encode-withselector",
        network=network,
        contractname=contractname,
        functionname=functionname,
        inputs=inputs,
        log=log,
    )
