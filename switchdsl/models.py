import re
from dataclasses import dataclass
from typing import Dict, Optional, Protocol

_DPID_RE = re.compile(r"^[0-9a-fA-F]{1,16}$")


class PortFormatter(Protocol):
    """Turns a raw ports string into its canonical form."""

    def __call__(self, ports_arg: str) -> str: ...


def indexed_ports(ports_arg: str) -> str:
    """
    Canonicalize a comma-separated port list.

    Each token becomes "<token>/<position>", position counting from 1:
        "eth0,eth1" -> "eth0/1,eth1/2"

    Empty segments are kept as-is, so "" -> "/1" and "a," -> "a/1,/2".
    """
    return ",".join(f"{v}/{i + 1}" for i, v in enumerate(ports_arg.split(",")))


def dpid_long_from(value: str) -> str:
    """Expand a datapath id like '0xabc' to '00:00:00:00:00:00:0a:bc'."""
    s = value.strip()
    if s[:2].lower() == "0x":
        s = s[2:]
    if not _DPID_RE.match(s):
        raise ValueError(f"Invalid datapath id: {value!r}")
    padded = s.lower().rjust(16, "0")
    return ":".join(padded[i : i + 2] for i in range(0, 16, 2))


@dataclass
class SwitchConfig:
    """Attributes shared by every switch stanza."""

    name: Optional[str] = None
    dpid_short: Optional[str] = None
    dpid_long: Optional[str] = None

    def set_dpid(self, value: str) -> None:
        self.dpid_long = dpid_long_from(value)
        self.dpid_short = value
        # A switch declared without a name is known by its dpid.
        if self.name is None:
            self.name = value


class TremaSwitch:
    """
    Declaration of a software switch and the ports attached to it.

    The name is taken as given. Ports start out unset and are filled in by
    set_ports(); a later call replaces the earlier value.

    Instances are not synchronized: build and mutate them from one thread.
    """

    def __init__(self, name: Optional[str] = None, formatter: PortFormatter = indexed_ports):
        self.config = SwitchConfig(name=name)
        self.formatter = formatter
        self.ports: Optional[str] = None

    @property
    def name(self) -> Optional[str]:
        return self.config.name

    @property
    def dpid_short(self) -> Optional[str]:
        return self.config.dpid_short

    @property
    def dpid_long(self) -> Optional[str]:
        return self.config.dpid_long

    def set_dpid(self, value: str) -> None:
        self.config.set_dpid(value)

    def set_ports(self, ports_arg: str) -> None:
        self.ports = self.formatter(ports_arg)

    def as_dict(self) -> Dict[str, Optional[str]]:
        return {
            "name": self.name,
            "dpid_short": self.dpid_short,
            "dpid_long": self.dpid_long,
            "ports": self.ports,
        }

    def __repr__(self) -> str:
        return f"TremaSwitch(name={self.name!r}, ports={self.ports!r})"
