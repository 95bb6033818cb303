"""
Resource kinds exposed by the restvpn API and their parameter records
"""
from dataclasses import dataclass
from typing import Dict, Type, Union

API_PREFIX = "/restvpn"


@dataclass
class RouteParams:
    """A route maps a certificate common name to a remote endpoint"""
    common_name: str = ""
    remote_ip: str = ""
    remote_port: str = ""
    description: str = ""
    netmask: str = ""

    @property
    def identity(self) -> str:
        return self.common_name

    def create_body(self) -> Dict[str, str]:
        """Body for POST: every field, identity included"""
        return {
            "common_name": self.common_name,
            "remote_ip": self.remote_ip,
            "remote_port": self.remote_port,
            "description": self.description,
            "netmask": self.netmask,
        }

    def update_body(self) -> Dict[str, str]:
        """Body for PUT: identity travels in the path only"""
        return {
            "remote_port": self.remote_port,
            "description": self.description,
            "netmask": self.netmask,
        }


@dataclass
class TunnelParams:
    """A tunnel maps a customer to a remote endpoint and gateway"""
    customer: str = ""
    remote_ip: str = ""
    remote_port: str = ""
    description: str = ""
    netmask: str = ""
    gateway: str = ""

    @property
    def identity(self) -> str:
        return self.customer

    def create_body(self) -> Dict[str, str]:
        """Body for POST: every field, identity included"""
        return {
            "customer": self.customer,
            "remote_ip": self.remote_ip,
            "remote_port": self.remote_port,
            "description": self.description,
            "mask": self.netmask,
            "gateway": self.gateway,
        }

    def update_body(self) -> Dict[str, str]:
        """Body for PUT: identity travels in the path only"""
        return {
            "remote_port": self.remote_port,
            "description": self.description,
            "mask": self.netmask,
            "gateway": self.gateway,
        }


Params = Union[RouteParams, TunnelParams]


@dataclass(frozen=True)
class Resource:
    """Everything that differs between the route and tunnel programs"""
    name: str
    prog: str
    identity_flag: str
    identity_help: str
    identity_attr: str
    params_class: Type
    has_gateway: bool = False

    @property
    def collection_path(self) -> str:
        return f"{API_PREFIX}/{self.name}"

    def item_path(self, *segments: str) -> str:
        """Path addressing one instance; segments are joined unescaped"""
        return "/".join((self.collection_path,) + segments)

    def params(self, identity: str = "", remote_ip: str = "", remote_port: str = "",
               description: str = "", netmask: str = "", gateway: str = "") -> Params:
        """Build the parameter record from the generic flag values"""
        fields = {
            self.identity_attr: identity,
            "remote_ip": remote_ip,
            "remote_port": remote_port,
            "description": description,
            "netmask": netmask,
        }
        if self.has_gateway:
            fields["gateway"] = gateway
        return self.params_class(**fields)


ROUTES = Resource(
    name="routes",
    prog="routes-cli",
    identity_flag="cname",
    identity_help="Common name",
    identity_attr="common_name",
    params_class=RouteParams,
)

TUNNELS = Resource(
    name="tunnels",
    prog="tunnels-cli",
    identity_flag="customer",
    identity_help="Customer name",
    identity_attr="customer",
    params_class=TunnelParams,
    has_gateway=True,
)

RESOURCES = {resource.name: resource for resource in (ROUTES, TUNNELS)}
