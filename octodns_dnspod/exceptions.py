#
#
#

from octodns.provider import ProviderException


class DnspodClientException(ProviderException):
    pass


class DnspodClientNotFound(DnspodClientException):
    def __init__(self):
        super().__init__('Not Found')


class DnspodClientUnauthorized(DnspodClientException):
    def __init__(self):
        super().__init__('Unauthorized')


class DnspodClientDecodeError(DnspodClientException):
    def __init__(self, method, reason):
        super().__init__(f'{method}: undecodable response body: {reason}')
        self.method = method


class DnspodStatusError(DnspodClientException):
    """The transport call succeeded but the remote status code was not "1".

    `partial` holds whatever payload was decoded from the envelope, which for
    single-record operations is the (possibly empty) record.
    """

    def __init__(self, failure, status, partial=None):
        super().__init__(f'{failure}: {status.message}')
        self.status = status
        self.code = status.code
        self.partial = partial
