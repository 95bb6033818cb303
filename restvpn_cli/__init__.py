"""
restvpn-cli - Command line client for the restvpn route and tunnel API
"""
__version__ = "1.0.0"
