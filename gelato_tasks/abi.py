"""
ABI artifacts and calldata encoding.
"""

import json
import os

from eth_abi import encode
from eth_utils import collapse_if_tuple, function_abi_to_4byte_selector, to_bytes, to_checksum_address

from gelato_tasks import config
from gelato_tasks.errors import ConfigError
from gelato_tasks.logger import get_logger

logger = get_logger(__name__)


def load_abi(contract_name, abi_dir=None):
    abi_file_path = os.path.join(abi_dir or config.ABI_DIR, f"{contract_name}.json")
    try:
        with open(abi_file_path, "r") as file:
            abi_data = json.load(file)
    except FileNotFoundError:
        raise ConfigError(f"ABI file missing for {contract_name}: {abi_file_path}")
    except json.JSONDecodeError as e:
        raise ConfigError(f"ABI file {abi_file_path}: JSON decode error: {e}")
    # accept bare ABI lists as well as build artifacts
    if isinstance(abi_data, list):
        return abi_data
    if "abi" not in abi_data:
        raise ConfigError(f"ABI file {abi_file_path} has no 'abi' key")
    return abi_data["abi"]


def get_function_abi(abi, function_name, n_inputs=None):
    candidates = [
        item for item in abi if item.get("type") == "function" and item.get("name") == function_name
    ]
    if n_inputs is not None:
        candidates = [item for item in candidates if len(item.get("inputs", [])) == n_inputs]
    if not candidates:
        arity = "" if n_inputs is None else f" with {n_inputs} inputs"
        raise ConfigError(f"function {function_name}{arity} not found in ABI")
    if len(candidates) > 1:
        raise ConfigError(f"function {function_name} is ambiguous, {len(candidates)} overloads match")
    return candidates[0]


def _element(param):
    """ABI param describing one element of an array param."""
    element = dict(param)
    element["type"] = param["type"][: param["type"].rindex("[")]
    return element


def normalize_arg(param, value):
    """
    Coerce a JSON-ish value (CLI input) into what the ABI codec expects:
    dicts/lists for tuples, 0x-strings for bytes, numeric strings for ints.
    """
    abi_type = param["type"]
    if abi_type.endswith("]"):
        element = _element(param)
        return [normalize_arg(element, v) for v in value]
    if abi_type == "tuple":
        components = param["components"]
        if isinstance(value, dict):
            missing = [c["name"] for c in components if c["name"] not in value]
            if missing:
                raise ConfigError(f"tuple {param.get('name')!r} missing fields {missing}")
            value = [value[c["name"]] for c in components]
        if len(value) != len(components):
            raise ConfigError(
                f"tuple {param.get('name')!r} expects {len(components)} fields, got {len(value)}"
            )
        return tuple(normalize_arg(c, v) for c, v in zip(components, value))
    if abi_type.startswith("bytes") and isinstance(value, str):
        return to_bytes(hexstr=value)
    if abi_type.startswith(("uint", "int")) and isinstance(value, str):
        try:
            return int(value, 0)
        except ValueError:
            raise ConfigError(f"{param.get('name')!r}: invalid {abi_type} {value!r}")
    if abi_type == "address" and isinstance(value, str):
        return to_checksum_address(value)
    return value


def normalize_args(fn_abi, inputs):
    params = fn_abi.get("inputs", [])
    if len(params) != len(inputs):
        raise ConfigError(
            f"{fn_abi['name']} expects {len(params)} inputs, got {len(inputs)}"
        )
    return [normalize_arg(p, v) for p, v in zip(params, inputs)]


def encode_with_selector(contract_name, function_name, inputs, abi=None):
    """Return 0x calldata: 4-byte selector followed by the encoded inputs."""
    if abi is None:
        abi = load_abi(contract_name)
    fn_abi = get_function_abi(abi, function_name, len(inputs))
    types = [collapse_if_tuple(p) for p in fn_abi["inputs"]]
    args = normalize_args(fn_abi, inputs)
    payload = function_abi_to_4byte_selector(fn_abi) + encode(types, args)
    logger.debug(f"encoded {contract_name}.{function_name}({', '.join(types)})")
    return "0x" + payload.hex()
