import threading
from xmlrpc.server import SimpleXMLRPCServer, SimpleXMLRPCRequestHandler
from flowgrind_stop.exceptions import StopFlowError
from flowgrind_stop.flow_control import FlowControlClient, NETWORK_ERROR


class RecordingClient(FlowControlClient):
    """
    records stop_flow calls instead of talking to a daemon
    """
    def __init__(self, endpoint, calls: list, failing_labels=()):
        super().__init__(endpoint)
        self.calls = calls
        self.failing_labels = failing_labels
        self.closed = False

    def stop_flow(self, flow_id: int):
        self.calls.append((self.endpoint.url, flow_id))
        if self.endpoint.label in self.failing_labels:
            raise StopFlowError(NETWORK_ERROR, 'Connection refused')
        return 0

    def close(self):
        self.closed = True


class FakeDaemon:
    """
    minimal xmlrpc server with flowgrind daemon's stop_flow method, running in a thread on localhost
    """
    def __init__(self, stop_flow_impl=None):
        self.requests = []
        self.user_agents = []
        self.__stop_flow_impl = stop_flow_impl

        daemon = self

        class _Handler(SimpleXMLRPCRequestHandler):
            rpc_paths = ('/RPC2',)

            def do_POST(self):
                daemon.user_agents.append(self.headers.get('User-Agent'))
                super().do_POST()

        self.server = SimpleXMLRPCServer(('127.0.0.1', 0), requestHandler=_Handler, logRequests=False)
        self.server.register_function(self._stop_flow, 'stop_flow')
        self.port = self.server.server_address[1]
        self.__thread = None

    def _stop_flow(self, params):
        self.requests.append(params)
        if self.__stop_flow_impl is not None:
            return self.__stop_flow_impl(params)
        return 0

    def __enter__(self):
        self.__thread = threading.Thread(target=self.server.serve_forever, daemon=True)
        self.__thread.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.server.shutdown()
        self.server.server_close()
        self.__thread.join(timeout=10)
