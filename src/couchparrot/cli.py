import argparse
import logging
import sys

import couchparrot.operations as op
from couchparrot.config import DEFAULT_HOST, DEFAULT_PORT, Configuration
from couchparrot.wrapper_class import FatalError

LOGGER = logging.getLogger(__name__)

COMMANDS = {
    "list": op.list_replications,
    "add": op.add_replication,
    "remove": op.remove_replication,
    "status": op.replication_status,
}


def args_gestion(argv=None):
    # -h is the host, help only answers to --help
    parser = argparse.ArgumentParser(prog="couch-parrot", add_help=False,
                                     description="Manage couchDB replication documents of the _replicator database")
    parser.add_argument("--help", action="help", help="Show this help message and exit")
    parser.add_argument("-h", "--host", metavar="<str>", help=f"The server host to connect to [default: {DEFAULT_HOST}]", default=DEFAULT_HOST)
    parser.add_argument("-P", "--port", metavar="<str>", help=f"The server port to use [default: {DEFAULT_PORT}]", default=DEFAULT_PORT)
    parser.add_argument("-s", "--source", metavar="<str>", help="The source argument for replications (add command)")
    parser.add_argument("-t", "--target", metavar="<str>", help="The target argument for replications (add command)")
    parser.add_argument("-i", "--id", metavar="<str>", help="Replication id to work with (add, remove and status commands)")
    parser.add_argument("-u", "--username", metavar="<str>", help="Username to connect to host with")
    parser.add_argument("-p", "--password", metavar="<str>", help="Password to connect to host with")
    parser.add_argument("-c", "--continuous", help="Continuous replication or not (add command)", action="store_true")
    parser.add_argument("-C", "--createTarget", help="Create target database (add command)", action="store_true")
    parser.add_argument("-v", "--verbose", help="Log requests sent to the server", action="store_true")
    parser.add_argument("command", choices=sorted(COMMANDS), metavar="command",
                        help="One of: " + ", ".join(COMMANDS))
    return parser.parse_args(argv)


def main(argv=None):
    args = args_gestion(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    config = Configuration.from_args(args)
    LOGGER.debug(f"Running {args.command} against {config.base_url}")
    try:
        COMMANDS[args.command](config)
    except FatalError as e:
        op.eprint(f"Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
