#
#
#

from .exceptions import DnspodStatusError
from .transport import Transport

# Failure prefixes for the raised DnspodStatusError. Record operations reuse
# the domain list text, callers match on it.
DOMAINS_FAILURE = 'could not get domains'
DOMAIN_LOGS_FAILURE = 'could not get domain logs'


class Service(object):
    """Base for the groups of remote operations sharing one transport."""

    def __init__(self, client: Transport):
        self._client = client

    @property
    def common(self):
        return self._client.common

    def _call(
        self, method, payload, envelope_cls, check=True, failure=DOMAINS_FAILURE
    ):
        """Post `payload` to `method` and decode it into `envelope_cls`.

        Transport errors propagate untouched. With `check` set a status code
        other than "1" raises DnspodStatusError carrying the decoded payload;
        without it the envelope is returned as-is whatever its status.
        """
        response, envelope = self._client.post(method, payload, envelope_cls)
        if check and not envelope.status.ok:
            raise DnspodStatusError(
                failure, envelope.status, partial=envelope.payload
            )
        return response, envelope
