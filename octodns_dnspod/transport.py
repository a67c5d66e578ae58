#
#
#

"""Protocol definition for the DNSPod transport.

Services only need something that can post a method with a form payload and
hand back the decoded envelope; this describes that shape structurally
(PEP 544) so tests and alternative transports need not inherit anything.
"""

from typing import Protocol, Tuple, Type, TypeVar

from .models import Envelope
from .payloads import CommonParams, Payload

E = TypeVar('E', bound=Envelope)


class Transport(Protocol):
    """Protocol defining the interface services expect from a client."""

    common: CommonParams

    def post(
        self, method: str, payload: Payload, envelope_cls: Type[E]
    ) -> Tuple[object, E]:
        """Perform one form-encoded POST and decode the JSON body.

        Args:
            method: Remote method name, e.g. 'Domain.List'
            payload: Flat form fields, common parameters included
            envelope_cls: Envelope model the body is decoded into

        Returns:
            Tuple of the raw response and the decoded envelope

        Raises:
            DnspodClientException: on unauthorized, not found or an
                undecodable body
            requests.RequestException: on network and other HTTP failures
        """
        ...
