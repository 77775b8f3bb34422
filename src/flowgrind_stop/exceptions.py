class MalformedAddressError(ValueError):
    """
    base for everything that is wrong with a daemon address given by the user.
    str() of these is the message shown to the user
    """
    def __init__(self, address: str):
        super().__init__(self._message(address))
        self.address = address

    def _message(self, address: str) -> str:
        return f'Error, malformed address: {address}'


class AddressTooLongError(MalformedAddressError):
    def _message(self, address: str) -> str:
        return f'Address too long: {address}'


class NoHostGivenError(MalformedAddressError):
    def _message(self, address: str) -> str:
        return f'Error, no address given: {address}'


class InvalidHostError(MalformedAddressError):
    def _message(self, address: str) -> str:
        return f'Error, invalid address given: {address}'


class InvalidPortError(MalformedAddressError):
    def _message(self, address: str) -> str:
        return f'Error, invalid port given: {address}'


class StopFlowError(RuntimeError):
    """
    any failure of a remote stop_flow call:
    connection problems, broken responses and faults reported by the daemon itself
    """
    def __init__(self, fault_code: int, fault_string: str):
        super().__init__(f'{fault_string} ({fault_code})')
        self.fault_code = fault_code
        self.fault_string = fault_string

    def __repr__(self):
        return f'<{self.__class__.__name__}: {self.fault_code}, {self.fault_string!r}>'
