#!/usr/bin/env python3
"""
Entry point for the restvpn command
"""
import sys


def main():
    """Dispatch to the routes or tunnels program"""
    # Import here to keep --help cheap
    from .cli import main as run_program
    from .resources import RESOURCES

    if len(sys.argv) > 1 and sys.argv[1] in RESOURCES:
        sys.exit(run_program(RESOURCES[sys.argv[1]], sys.argv[2:]))

    if len(sys.argv) > 1 and sys.argv[1] == "--version":
        from . import __version__
        print(f"restvpn v{__version__}")
        sys.exit(0)

    print("restvpn - Command line client for the restvpn API")
    print("\nUsage:")
    print("  restvpn routes <command> [flags]     Manage routes (same as routes-cli)")
    print("  restvpn tunnels <command> [flags]    Manage tunnels (same as tunnels-cli)")
    print("  restvpn --version                    Show version")
    print("  restvpn --help                       Show this help")
    print("\nEnvironment Variables:")
    print("  RESTVPN_ADDR      API address (default: http://localhost:5000)")
    print("  RESTVPN_KEY       API key sent as X-Api-Key")
    print("  RESTVPN_DEBUG     Log outgoing requests to stderr")
    sys.exit(0 if len(sys.argv) > 1 and sys.argv[1] in ("-h", "--help") else 1)


if __name__ == "__main__":
    main()
