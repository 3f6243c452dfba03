from __future__ import annotations

from typing import Optional
import argparse
import logging
import sys

from bart import config, initialize_logger, Shell

LOGGER = logging.getLogger('bart.scripts.exec')


def parse_args(argv:Optional[list[str]]=None):
    parser = argparse.ArgumentParser(description="Run a command through the bart Shell")

    parser.add_argument("command", help="command line to run")
    parser.add_argument("--conf", metavar="file path", default=None, help="configuration file path")
    parser.add_argument("--conf_key", metavar="key", default="shell",
                        help="key of the shell configuration in the configuration file")
    parser.add_argument("--passthru", action='store_true', default=False,
                        help="let the command write to the terminal directly")
    parser.add_argument("--logger", metavar="file path", default=None, help="logger configuration file path")

    return parser.parse_args(argv)


def main(argv:Optional[list[str]]=None) -> int:
    args = parse_args(argv)
    initialize_logger(args.logger)

    conf = config.load(args.conf) if args.conf else config.to_conf()
    shell_conf = config.get(conf, args.conf_key, default=None)
    shell_conf = shell_conf if shell_conf is not None else config.to_conf()
    LOGGER.debug(f'shell configuration: {config.to_dict(shell_conf)}')
    shell = Shell.from_conf(shell_conf)

    if args.passthru:
        return shell.passthru(args.command)

    result = shell.execute(args.command)
    for line in result.output:
        print(line)
    return result.exit_code

if __name__ == '__main__':
    sys.exit(main())
