from pprint import pprint

from gelato_tasks.chain import connect, get_parsed_logs, instantiate_contract
from gelato_tasks.tasks import flag, param, task


def format_log(parsed_log):
    return {"event": parsed_log["event"], "args": dict(parsed_log["args"])}


@task(
    "event-getparsedlogsallevents",
    "Returns all events a contract emitted in a transaction, decoded",
    param("--contractname", required=True),
    param("--contractaddress", help="Provide this if not in bre-config deployments"),
    param("--blockhash", required=True, help="Block the transaction was mined in"),
    param("--txhash", required=True),
    flag("--log", help="Logs parsed Event Logs to stdout"),
    web3=None,
)
def get_parsed_logs_all_events(network, contractname, contractaddress, blockhash, txhash, log, web3=None):
    if web3 is None:
        web3 = connect(network)
    contract = instantiate_contract(web3, network, contractname, contractaddress)
    parsed_logs = [format_log(p) for p in get_parsed_logs(web3, contract, blockhash, txhash)]
    if log:
        if not parsed_logs:
            print(f"\n no {contractname} events in {txhash}\n")
        for parsed_log in parsed_logs:
            print(f"\n{contractname} event log:")
            pprint(parsed_log)
    return parsed_logs
