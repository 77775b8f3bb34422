import re
from dataclasses import dataclass
from .config import get_config
from .exceptions import AddressTooLongError, NoHostGivenError, InvalidHostError, InvalidPortError

from typing import Optional, Tuple


_port_re = re.compile(r'[0-9]+')
# characters that would change where the url points to
_bad_host_re = re.compile(r'[\s/?#@\[\]\\]')


@dataclass(frozen=True)
class Endpoint:
    host: str
    port: int
    rpc_path: str = '/RPC2'

    @property
    def label(self) -> str:
        """
        canonical host:port, as shown to the user
        """
        return f'{self.host}:{self.port}'

    @property
    def url(self) -> str:
        return f'http://{self.host}:{self.port}{self.rpc_path}'


def address_to_host_port(addr_str: str, default_port: int, max_length: Optional[int] = None) -> Tuple[str, int]:
    """
    split user given address of form host or host:port
    only the first colon separates the port

    :raises AddressTooLongError: if max_length is given and address is longer than that
    :raises NoHostGivenError: if host part is empty
    :raises InvalidHostError: if host has whitespace, control characters or url delimiters, like / ? # @ [ ]
    :raises InvalidPortError: if port part is not a decimal number in [1, 65535]. empty port is invalid too
    """
    if max_length is not None and len(addr_str) > max_length:
        raise AddressTooLongError(addr_str)
    host, sep, sport = addr_str.partition(':')
    if host == '':
        raise NoHostGivenError(addr_str)
    if _bad_host_re.search(host) is not None or not host.isprintable():
        raise InvalidHostError(addr_str)
    if not sep:
        return host, default_port

    if _port_re.fullmatch(sport) is None:
        raise InvalidPortError(addr_str)
    port = int(sport)
    if not 1 <= port <= 65535:
        raise InvalidPortError(addr_str)
    return host, port


def address_to_endpoint(addr_str: str) -> Endpoint:
    """
    normalize address into daemon control endpoint, using configured defaults
    """
    config = get_config()
    host, port = address_to_host_port(addr_str,
                                      default_port=config.get_option_noasync('daemon.port'),
                                      max_length=config.get_option_noasync('address.max_length'))
    return Endpoint(host, port, config.get_option_noasync('daemon.rpc_path'))
