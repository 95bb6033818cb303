"""
Command line front end shared by routes-cli and tunnels-cli
"""
import argparse
import logging
import sys
from typing import List, Optional, Tuple

from . import __version__
from .api_client import APIClient
from .config import ADDR_VAR, DEBUG_VAR, KEY_VAR, Config, load_env_file
from .exceptions import RestVPNError
from .resources import ROUTES, TUNNELS, Resource

logger = logging.getLogger(__name__)

COMMANDS = ("list", "get", "add", "update", "delete")
SUBCOMMAND_REQUIRED = "HELP: 'list', 'get', 'add', 'update' or 'delete' subcommand is required"
LIST_TAKES_NO_ARGS = "WARNING: 'list' command does not accept any arguments"


def configure_logging(debug: bool = False):
    """Log to stderr with a timestamp prefix"""
    logging.basicConfig(
        format="%(asctime)s %(message)s",
        datefmt="%Y/%m/%d %H:%M:%S",
        level=logging.DEBUG if debug else logging.INFO,
        stream=sys.stderr,
    )


def usage(resource: Resource) -> str:
    """Top level help text"""
    ident = f"-{resource.identity_flag} <name>"
    gw = " [-gw <gateway>]" if resource.has_gateway else ""
    return "\n".join([
        "HELP:",
        f"    Warning: Make sure to set {ADDR_VAR} and {KEY_VAR}.",
        f"    CLI supports one of the following commands: {', '.join(COMMANDS)}",
        "",
        "Usage:",
        f"  {resource.prog} list",
        f"  {resource.prog} get {ident}",
        f"  {resource.prog} add {ident} -ip <ip> -port <port> [-desc <text>] [-mask <mask>]{gw}",
        f"  {resource.prog} update {ident} -ip <ip> [-port <port>] [-desc <text>] [-mask <mask>]{gw}",
        f"  {resource.prog} delete {ident} -ip <ip>",
        "",
        "Environment Variables:",
        f"  {ADDR_VAR}      API address (default: http://localhost:5000)",
        f"  {KEY_VAR}       API key sent as X-Api-Key",
        f"  {DEBUG_VAR}     Log outgoing requests to stderr",
        "",
        "A .env file in the working directory or any parent is read as well.",
        f"Exported variables win; a stray .env can still set {KEY_VAR} and send X-Api-Key.",
    ])


def _add_flag(parser: argparse.ArgumentParser, name: str, dest: str, help: str):
    # Go style flags: -name value, -name=value and --name value all work
    parser.add_argument(f"-{name}", f"--{name}", dest=dest, default="", metavar="string", help=help)


def go_style_args(args: List[str], value_options: List[str]) -> List[str]:
    """Rewrite args so argparse reads them the way Go's flag package does.

    A value flag always takes the next token, even one starting with a
    dash, and parsing stops at the first non-flag token or at "--".
    """
    result = []
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--" or arg == "-" or not arg.startswith("-"):
            break
        if arg in value_options and i + 1 < len(args):
            result.append(f"{arg}={args[i + 1]}")
            i += 2
            continue
        result.append(arg)
        i += 1
    return result


def build_parser(resource: Resource, command: str) -> Tuple[argparse.ArgumentParser, List[Tuple[str, str]]]:
    """Flag set for one subcommand, plus its required (flag, dest) pairs"""
    parser = argparse.ArgumentParser(prog=f"{resource.prog} {command}", allow_abbrev=False)
    required = [(resource.identity_flag, "identity")]
    _add_flag(parser, resource.identity_flag, "identity", f"{resource.identity_help} (required)")

    if command == "get":
        return parser, required

    _add_flag(parser, "ip", "remote_ip", "Remote ip (required)")
    required.append(("ip", "remote_ip"))

    if command == "delete":
        return parser, required

    if command == "add":
        _add_flag(parser, "port", "remote_port", "Remote port (required)")
        required.append(("port", "remote_port"))
    else:
        _add_flag(parser, "port", "remote_port", "Remote port")
    _add_flag(parser, "desc", "description", "Brief description")
    _add_flag(parser, "mask", "netmask", f"{resource.name[:-1].capitalize()} netmask")
    if resource.has_gateway:
        _add_flag(parser, "gw", "gateway", "Tunnel gateway")
    return parser, required


def write_body(body: bytes, stream=None):
    """Write the response body exactly as received"""
    stream = stream or sys.stdout
    stream.flush()
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        stream.write(body.decode("utf-8", errors="replace"))
        stream.flush()
        return
    buffer.write(body)
    buffer.flush()


def run(resource: Resource, argv: List[str], config: Config,
        client: Optional[APIClient] = None) -> int:
    """Route one invocation to a single API call; returns the exit status.

    RestVPNError from the client is left to the caller.
    """
    if not argv or argv[0] not in COMMANDS + ("-h", "--help", "--version"):
        print(SUBCOMMAND_REQUIRED)
        return 1

    command, args = argv[0], argv[1:]
    if command in ("-h", "--help"):
        print(usage(resource))
        return 0
    if command == "--version":
        print(f"{resource.prog} v{__version__}")
        return 0

    if client is None:
        with APIClient(config) as client:
            return run_command(resource, command, args, client)
    return run_command(resource, command, args, client)


def run_command(resource: Resource, command: str, args: List[str], client: APIClient) -> int:
    """Parse the flags of one subcommand and issue its request"""
    if command == "list":
        if args:
            print(LIST_TAKES_NO_ARGS)
        write_body(client.list(resource))
        return 0

    parser, required = build_parser(resource, command)
    value_options = [
        option for action in parser._actions if action.nargs is None
        for option in action.option_strings
    ]
    flags = parser.parse_args(go_style_args(args, value_options))
    missing = [name for name, dest in required if not getattr(flags, dest)]
    if missing:
        print(f"{parser.prog}: missing required flag(s): "
              f"{', '.join('-' + name for name in missing)}", file=sys.stderr)
        parser.print_help(sys.stderr)
        return 1

    if command == "get":
        write_body(client.get(resource, flags.identity))
        return 0

    params = resource.params(**vars(flags))
    if command == "add":
        body = client.add(resource, params)
    elif command == "update":
        body = client.update(resource, params)
    else:
        body = client.delete(resource, params)
    write_body(body)
    return 0


def main(resource: Resource, argv: Optional[List[str]] = None) -> int:
    """Read configuration, run one command and turn failures into exit status 1"""
    if argv is None:
        argv = sys.argv[1:]

    load_env_file()
    config = Config.from_env()
    configure_logging(config.debug)

    try:
        return run(resource, argv, config)
    except RestVPNError as e:
        logger.critical("%s", e)
        return 1


def routes_main():
    """Entry point for the routes-cli command"""
    sys.exit(main(ROUTES))


def tunnels_main():
    """Entry point for the tunnels-cli command"""
    sys.exit(main(TUNNELS))
