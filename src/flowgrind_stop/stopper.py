import sys
from .config import get_config
from .exceptions import MalformedAddressError, StopFlowError
from .flow_control import FlowControlClient, XmlRpcFlowControlClient
from .logging import get_logger
from .nethelpers import Endpoint, address_to_endpoint

from typing import Callable, Iterable, Optional


class FlowStopper:
    """
    stops all flows on daemons, one address at a time.
    malformed addresses and failed remote calls are reported to the user and not propagated,
    so one bad address does not affect the others
    """
    def __init__(self, client_factory: Optional[Callable[[Endpoint], FlowControlClient]] = None):
        self.__logger = get_logger('stopper')
        self.__client_factory = client_factory or XmlRpcFlowControlClient

    def stop(self, address: str) -> None:
        try:
            endpoint = address_to_endpoint(address)
        except MalformedAddressError as e:
            print(str(e), file=sys.stderr)
            return

        print(f'Stopping all flows on {endpoint.label}')
        sys.stdout.flush()

        flow_id = get_config().get_option_noasync('daemon.stop_all_flow_id')
        try:
            with self.__client_factory(endpoint) as client:
                client.stop_flow(flow_id)
        except StopFlowError as e:
            print(f'Could not stop flows on {endpoint.label}: {e.fault_string} ({e.fault_code})', file=sys.stderr)
            return
        self.__logger.debug(f'flows on {endpoint.label} stopped')

    def stop_all(self, addresses: Iterable[str]) -> None:
        for address in addresses:
            self.stop(address)
