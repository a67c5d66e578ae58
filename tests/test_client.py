#
# Tests for the DNSPod HTTP transport
#

from unittest import TestCase
from unittest.mock import Mock

from requests import ConnectionError as RequestsConnectionError
from requests import HTTPError

from octodns_dnspod import __version__
from octodns_dnspod.client import DnspodClient
from octodns_dnspod.exceptions import (
    DnspodClientDecodeError,
    DnspodClientNotFound,
    DnspodClientUnauthorized,
)
from octodns_dnspod.models import DomainListEnvelope


def _response(body=None, status_code=200):
    response = Mock()
    response.status_code = status_code
    response.json.return_value = body
    return response


class TestDnspodClient(TestCase):
    def _client(self, response):
        client = DnspodClient('42,secret', lang='en', timeout=5)
        client._session = Mock()
        client._session.post.return_value = response
        return client

    def test_session_headers(self):
        client = DnspodClient('42,secret')
        agent = client._session.headers['User-Agent']
        self.assertIn(f'octodns-dnspod/{__version__}', agent)
        self.assertIn('octodns/', agent)
        self.assertEqual(
            DnspodClient.DEFAULT_TIMEOUT, client.timeout
        )

    def test_common_params(self):
        client = DnspodClient('42,secret', lang='en', user_id='7')
        self.assertEqual(
            {
                'login_token': '42,secret',
                'format': 'json',
                'lang': 'en',
                'user_id': '7',
            },
            client.common.to_payload(),
        )

    def test_post_decodes_envelope(self):
        body = {
            'status': {'code': '1', 'message': 'ok'},
            'domains': [{'id': 1, 'name': 'unit.tests'}],
        }
        response = _response(body)
        client = self._client(response)
        payload = {'login_token': '42,secret', 'format': 'json'}

        res, envelope = client.post('Domain.List', payload, DomainListEnvelope)

        self.assertIs(response, res)
        self.assertIsInstance(envelope, DomainListEnvelope)
        self.assertEqual('unit.tests', envelope.domains[0].name)
        client._session.post.assert_called_once_with(
            'https://dnsapi.cn/Domain.List', data=payload, timeout=5
        )

    def test_unauthorized(self):
        client = self._client(_response(status_code=401))
        with self.assertRaises(DnspodClientUnauthorized):
            client.post('Domain.List', {}, DomainListEnvelope)

    def test_not_found(self):
        client = self._client(_response(status_code=404))
        with self.assertRaises(DnspodClientNotFound):
            client.post('Domain.List', {}, DomainListEnvelope)

    def test_http_error_propagates(self):
        response = _response(status_code=500)
        response.raise_for_status.side_effect = HTTPError('500 Server Error')
        client = self._client(response)
        with self.assertRaises(HTTPError):
            client.post('Domain.List', {}, DomainListEnvelope)

    def test_network_error_propagates_unmodified(self):
        client = self._client(None)
        error = RequestsConnectionError('boom')
        client._session.post.side_effect = error
        with self.assertRaises(RequestsConnectionError) as ctx:
            client.post('Domain.List', {}, DomainListEnvelope)
        self.assertIs(error, ctx.exception)

    def test_undecodable_body(self):
        response = _response()
        response.json.side_effect = ValueError('Expecting value')
        client = self._client(response)
        with self.assertRaises(DnspodClientDecodeError) as ctx:
            client.post('Domain.List', {}, DomainListEnvelope)
        self.assertIn('Domain.List', str(ctx.exception))
        self.assertIsInstance(ctx.exception.__cause__, ValueError)

    def test_body_not_an_object(self):
        client = self._client(_response(['not', 'an', 'object']))
        with self.assertRaises(DnspodClientDecodeError) as ctx:
            client.post('Domain.List', {}, DomainListEnvelope)
        self.assertIn('expected an object, got list', str(ctx.exception))

    def test_body_wrong_shape(self):
        client = self._client(
            _response({'status': {'code': '1'}, 'domains': 5})
        )
        with self.assertRaises(DnspodClientDecodeError):
            client.post('Domain.List', {}, DomainListEnvelope)
