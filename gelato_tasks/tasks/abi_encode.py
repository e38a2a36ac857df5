import json

from gelato_tasks.abi import encode_with_selector
from gelato_tasks.tasks import flag, param, task


@task(
    "abi-encode-withselector",
    "Returns the abi-encoded calldata (with function selector) of a contract call",
    param("--contractname", required=True, help="Name of the contract whose ABI is used"),
    param("--functionname", required=True, help="Function to encode"),
    param("--inputs", type=json.loads, default=[], help="JSON list of the function inputs"),
    flag("--log", help="Logs return values to stdout"),
)
def abi_encode_with_selector(network, contractname, functionname, inputs, log):
    payload_with_selector = encode_with_selector(contractname, functionname, inputs)
    if log:
        print(f"\n{contractname}.{functionname}({', '.join(map(str, inputs))})")
        print(f"payloadWithSelector: {payload_with_selector}\n")
    return payload_with_selector
