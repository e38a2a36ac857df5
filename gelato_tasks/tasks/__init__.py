"""
Task registry. A task is a plain function taking keyword arguments; the
decorator records its CLI parameters so cli.py can build a subcommand and
run() can call it from other tasks with defaults filled in.
"""

from gelato_tasks import config
from gelato_tasks.errors import ConfigError

TASKS = {}


class Task:
    def __init__(self, name, description, params, action, internal=None):
        self.name = name
        self.description = description
        self.params = params
        self.action = action
        # keyword arguments other tasks may pass, never exposed on the CLI
        self.internal = internal or {}

    def defaults(self):
        values = {"network": config.DEFAULT_NETWORK, **self.internal}
        for flags, kwargs in self.params:
            is_flag = kwargs.get("action") == "store_true"
            values[kwargs["dest"]] = kwargs.get("default", False if is_flag else None)
        return values

    def add_arguments(self, parser):
        for flags, kwargs in self.params:
            parser.add_argument(*flags, **kwargs)

    def __call__(self, **kwargs):
        values = self.defaults()
        unknown = set(kwargs) - set(values)
        if unknown:
            raise ConfigError(f"{self.name}: unknown arguments {sorted(unknown)}")
        values.update(kwargs)
        missing = [kw["dest"] for flags, kw in self.params if kw.get("required") and values[kw["dest"]] is None]
        if missing:
            raise ConfigError(f"{self.name}: missing required arguments {missing}")
        return self.action(**values)


def param(*flags, **kwargs):
    kwargs.setdefault("dest", flags[0].lstrip("-").replace("-", "_"))
    return flags, kwargs


def flag(*flags, help=None):
    return param(*flags, action="store_true", help=help)


def task(name, description, *params, **internal):
    def register(fn):
        TASKS[name] = Task(name, description, params, fn, internal)
        return fn
    return register


def run(name, **kwargs):
    if name not in TASKS:
        raise ConfigError(f"no task named {name!r}")
    return TASKS[name](**kwargs)


# registration happens on import
from gelato_tasks.tasks import abi_encode, bre_config, events, gelato_providers, minting  # noqa: E402,F401
