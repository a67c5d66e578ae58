#
#
#

import logging

from pydantic import ValidationError
from requests import Session

from octodns import __VERSION__ as octodns_version

from . import __version__ as package_version
from .domains import DomainsService
from .exceptions import (
    DnspodClientDecodeError,
    DnspodClientNotFound,
    DnspodClientUnauthorized,
)
from .payloads import CommonParams
from .records import RecordsService


class DnspodClient(object):
    BASE_URL = 'https://dnsapi.cn'
    DEFAULT_TIMEOUT = 30

    def __init__(
        self,
        login_token,
        lang='',
        error_on_empty='',
        user_id='',
        timeout=DEFAULT_TIMEOUT,
    ):
        self.log = logging.getLogger('DnspodClient')
        self.common = CommonParams(
            login_token=login_token,
            lang=lang,
            error_on_empty=error_on_empty,
            user_id=user_id,
        )
        self.timeout = timeout

        session = Session()
        session.headers.update(
            {
                'Accept': 'application/json',
                'User-Agent': f'octodns/{octodns_version} octodns-dnspod/{package_version}',
            }
        )
        self._session = session

        self.domains = DomainsService(self)
        self.records = RecordsService(self)

    def _do(self, method, payload):
        url = f'{self.BASE_URL}/{method}'
        self.log.debug('_do: method=%s, fields=%s', method, sorted(payload))
        response = self._session.post(url, data=payload, timeout=self.timeout)
        if response.status_code == 401:
            raise DnspodClientUnauthorized()
        if response.status_code == 404:
            raise DnspodClientNotFound()
        response.raise_for_status()
        return response

    def post(self, method, payload, envelope_cls):
        response = self._do(method, payload)
        try:
            body = response.json()
        except ValueError as e:
            raise DnspodClientDecodeError(method, e) from e
        if not isinstance(body, dict):
            raise DnspodClientDecodeError(
                method, f'expected an object, got {type(body).__name__}'
            )
        try:
            envelope = envelope_cls.model_validate(body)
        except ValidationError as e:
            raise DnspodClientDecodeError(method, e) from e
        self.log.debug(
            'post: method=%s, code=%s', method, envelope.status.code
        )
        return response, envelope
