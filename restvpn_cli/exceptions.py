"""
Errors raised while talking to the restvpn API
"""


class RestVPNError(Exception):
    """Base class for every error the client raises"""


class RequestBuildError(RestVPNError):
    """The request could not be composed (bad address, unserializable body)"""


class TransportError(RestVPNError):
    """The request was sent but the exchange failed (DNS, refused, read error)"""
