from unittest import TestCase
from urllib.parse import urlsplit
from flowgrind_stop import nethelpers
from flowgrind_stop.config import set_config_overrides
from flowgrind_stop.exceptions import AddressTooLongError, NoHostGivenError, InvalidHostError, InvalidPortError, MalformedAddressError


class AddressParsingTests(TestCase):
    def tearDown(self) -> None:
        set_config_overrides(None)

    def test_host_and_port(self):
        for host, port in (('10.0.0.1', 9000), ('localhost', 1), ('example.org', 65535), ('127.2.3.4', 5999)):
            self.assertEqual((host, port), nethelpers.address_to_host_port(f'{host}:{port}', 5999))

    def test_default_port(self):
        self.assertEqual(('example.org', 5999), nethelpers.address_to_host_port('example.org', 5999))
        self.assertEqual(('example.org', 1234), nethelpers.address_to_host_port('example.org', 1234))

    def test_only_first_colon_splits(self):
        # the rest is the port, so it has to be a number
        with self.assertRaises(InvalidPortError):
            nethelpers.address_to_host_port('host:12:34', 5999)

    def test_no_host(self):
        for addr in (':5999', ':', '', ':abc'):
            with self.assertRaises(NoHostGivenError) as cm:
                nethelpers.address_to_host_port(addr, 5999)
            self.assertEqual(f'Error, no address given: {addr}', str(cm.exception))
            self.assertEqual(addr, cm.exception.address)

    def test_invalid_port(self):
        for addr in ('badhost:', 'host:0', 'host:65536', 'host:-1', 'host:+12', 'host:12abc', 'host: 12', 'host:abc', 'host:١٢'):
            with self.assertRaises(InvalidPortError) as cm:
                nethelpers.address_to_host_port(addr, 5999)
            self.assertEqual(f'Error, invalid port given: {addr}', str(cm.exception))

    def test_leading_zeroes_port(self):
        self.assertEqual(('host', 80), nethelpers.address_to_host_port('host:0080', 5999))

    def test_too_long(self):
        addr = 'a' * 951
        with self.assertRaises(AddressTooLongError) as cm:
            nethelpers.address_to_host_port(addr, 5999, max_length=950)
        self.assertEqual(f'Address too long: {addr}', str(cm.exception))
        self.assertIsInstance(cm.exception, MalformedAddressError)
        self.assertIsInstance(cm.exception, ValueError)

        self.assertEqual(('a' * 950, 5999), nethelpers.address_to_host_port('a' * 950, 5999, max_length=950))
        self.assertEqual(('a' * 2000, 5999), nethelpers.address_to_host_port('a' * 2000, 5999))

    def test_endpoint(self):
        endpoint = nethelpers.address_to_endpoint('10.0.0.1:9000')
        self.assertEqual('10.0.0.1', endpoint.host)
        self.assertEqual(9000, endpoint.port)
        self.assertEqual('10.0.0.1:9000', endpoint.label)
        self.assertEqual('http://10.0.0.1:9000/RPC2', endpoint.url)

        endpoint = nethelpers.address_to_endpoint('example.org')
        self.assertEqual('example.org:5999', endpoint.label)
        self.assertEqual('http://example.org:5999/RPC2', endpoint.url)

    def test_endpoint_uses_config(self):
        set_config_overrides({'daemon': {'port': 6000, 'rpc_path': '/control'},
                              'address': {'max_length': 10}})
        endpoint = nethelpers.address_to_endpoint('localhost')
        self.assertEqual('http://localhost:6000/control', endpoint.url)
        with self.assertRaises(AddressTooLongError):
            nethelpers.address_to_endpoint('verylonghostname')

    def test_endpoint_default_max_length(self):
        with self.assertRaises(AddressTooLongError):
            nethelpers.address_to_endpoint('h' * 951)
        self.assertEqual('h' * 950 + ':5999', nethelpers.address_to_endpoint('h' * 950).label)

    def test_invalid_host(self):
        for addr in ('[foo', 'foo]', '[abc]', '[::1]:5999', 'a/b', 'a/b:5999', 'a?b', 'a#b', 'user@host', 'user@host:80',
                     'a b', ' host', 'host\t', 'ho\x00st', 'a\\b'):
            with self.assertRaises(InvalidHostError) as cm:
                nethelpers.address_to_host_port(addr, 5999)
            self.assertEqual(f'Error, invalid address given: {addr}', str(cm.exception))
            self.assertIsInstance(cm.exception, MalformedAddressError)

    def test_url_points_to_label(self):
        for addr in ('10.0.0.1:9000', 'example.org', 'some-host.local:1', 'xn--bcher-kva.example:65535', 'bücher.example'):
            endpoint = nethelpers.address_to_endpoint(addr)
            parts = urlsplit(endpoint.url)
            self.assertEqual(endpoint.label, parts.netloc)
            self.assertEqual(endpoint.host.lower(), parts.hostname)
            self.assertEqual(endpoint.port, parts.port)
            self.assertEqual('/RPC2', parts.path)
