import http.client
import xmlrpc.client
from xml.parsers.expat import ExpatError
from .config import get_config
from .exceptions import StopFlowError
from .logging import get_logger
from .nethelpers import Endpoint

from typing import Any, Optional


# fault codes for failures that happen before the daemon could answer with a proper fault
# same values xmlrpc-c based flowgrind tools report
INTERNAL_ERROR = -500
PARSE_ERROR = -503
NETWORK_ERROR = -504


class FlowControlClient:
    """
    remote control interface of a single daemon
    """
    def __init__(self, endpoint: Endpoint):
        self._endpoint = endpoint

    @property
    def endpoint(self) -> Endpoint:
        return self._endpoint

    def stop_flow(self, flow_id: int) -> Any:
        """
        stop flow with given id on the daemon, flow id -1 means all flows

        :raises StopFlowError: on any failure
        """
        raise NotImplementedError()

    def close(self):
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


class _UserAgentTransport(xmlrpc.client.Transport):
    def __init__(self, user_agent: str):
        super().__init__()
        self.user_agent = user_agent


class XmlRpcFlowControlClient(FlowControlClient):
    def __init__(self, endpoint: Endpoint, user_agent: Optional[str] = None):
        super().__init__(endpoint)
        if user_agent is None:
            user_agent = get_config().get_option_noasync('rpc.user_agent')
        self.__logger = get_logger('flow_control')
        try:
            self.__proxy = xmlrpc.client.ServerProxy(endpoint.url, transport=_UserAgentTransport(user_agent))
        except (ValueError, OSError) as e:
            raise StopFlowError(INTERNAL_ERROR, f'invalid url {endpoint.url}: {e}') from e

    def stop_flow(self, flow_id: int) -> Any:
        self.__logger.debug(f'calling stop_flow(flow_id={flow_id}) at {self.endpoint.url}')
        try:
            return self.__proxy.stop_flow({'flow_id': flow_id})
        except xmlrpc.client.Fault as e:
            raise StopFlowError(e.faultCode, e.faultString) from e
        except xmlrpc.client.ProtocolError as e:
            raise StopFlowError(e.errcode, e.errmsg) from e
        except http.client.InvalidURL as e:  # request was never sent
            raise StopFlowError(INTERNAL_ERROR, f'invalid url {self.endpoint.url}: {e}') from e
        except OSError as e:  # includes remote disconnects
            self.__logger.debug('transport failure', exc_info=True)
            raise StopFlowError(NETWORK_ERROR, str(e) or e.__class__.__name__) from e
        except (xmlrpc.client.Error, ExpatError, http.client.HTTPException) as e:
            self.__logger.debug('bad response', exc_info=True)
            raise StopFlowError(PARSE_ERROR, f'bad response from server: {e}') from e

    def close(self):
        self.__proxy('close')()
