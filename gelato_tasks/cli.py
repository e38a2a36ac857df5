"""
gelato-tasks command line: one subcommand per registered task.

    $ gelato-tasks --network rinkeby bre-config --addressbookcategory gelatoExecutor
    $ gelato-tasks gc-multiprovide --funds 0.1 --events --log
"""

import argparse
from pprint import pprint

from gelato_tasks import config
from gelato_tasks.logger import setup_logger
from gelato_tasks.networks import NETWORKS
from gelato_tasks.tasks import TASKS, run


def build_parser():
    parser = argparse.ArgumentParser(prog="gelato-tasks", description="Gelato CLI tasks")
    parser.add_argument('--network', type=str, choices=sorted(NETWORKS), default=config.DEFAULT_NETWORK)
    parser.add_argument('--log-level', type=str.upper, choices=config.LOG_LEVELS, default=config.LOG_LEVEL)
    subparsers = parser.add_subparsers(dest="task", metavar="TASK")
    subparsers.required = True

    for name in sorted(TASKS):
        t = TASKS[name]
        sub = subparsers.add_parser(name, help=t.description, description=t.description)
        # also accepted after the task name
        sub.add_argument('--network', type=str, choices=sorted(NETWORKS), default=argparse.SUPPRESS)
        t.add_arguments(sub)
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    # argparse does not check a default against choices
    if args.log_level not in config.LOG_LEVELS:
        parser.error(f"invalid LOG_LEVEL {args.log_level!r}, choose from {config.LOG_LEVELS}")
    task_args = vars(args)
    name = task_args.pop("task")
    logger = setup_logger(level=task_args.pop("log_level"))

    try:
        result = run(name, **task_args)
    except Exception as e:
        logger.error(f"{name} failed: {e}")
        logger.debug("traceback", exc_info=True)
        return 1

    if isinstance(result, str):
        print(result)
    elif result is not None:
        pprint(result)
    return 0
