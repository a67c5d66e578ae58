#
#
#

from .models import DomainEnvelope, DomainListEnvelope, DomainLogEnvelope
from .payloads import DomainListRequest, set_if
from .service import DOMAIN_LOGS_FAILURE, DOMAINS_FAILURE, Service

METHOD_DOMAIN_LIST = 'Domain.List'
METHOD_DOMAIN_CREATE = 'Domain.Create'
METHOD_DOMAIN_INFO = 'Domain.Info'
METHOD_DOMAIN_REMOVE = 'Domain.Remove'
METHOD_DOMAIN_LOG = 'Domain.Log'


class DomainsService(Service):
    """Domain related methods of the DNSPod API.

    Create, get and delete do not check the remote status code: whatever the
    body decodes to is returned as if the call succeeded. List and log raise
    DnspodStatusError on a failed status.
    """

    def list(self, request=None):
        if request is None:
            request = DomainListRequest()
        payload = request.to_payload(self.common)
        response, envelope = self._call(
            METHOD_DOMAIN_LIST,
            payload,
            DomainListEnvelope,
            failure=DOMAINS_FAILURE,
        )
        return envelope.domains, response

    def create(self, domain):
        payload = self.common.to_payload()
        set_if(payload, 'domain', domain.name)
        set_if(payload, 'group_id', domain.group_id)
        set_if(payload, 'is_mark', domain.is_mark)
        response, envelope = self._call(
            METHOD_DOMAIN_CREATE, payload, DomainEnvelope, check=False
        )
        return envelope.domain, response

    def get(self, id):
        payload = set_if(self.common.to_payload(), 'domain_id', id)
        response, envelope = self._call(
            METHOD_DOMAIN_INFO, payload, DomainEnvelope, check=False
        )
        return envelope.domain, response

    def delete(self, id):
        payload = set_if(self.common.to_payload(), 'domain_id', id)
        response, _ = self._call(
            METHOD_DOMAIN_REMOVE, payload, DomainEnvelope, check=False
        )
        return response

    def log(self, request):
        payload = request.to_payload(self.common)
        _, envelope = self._call(
            METHOD_DOMAIN_LOG,
            payload,
            DomainLogEnvelope,
            failure=DOMAIN_LOGS_FAILURE,
        )
        return envelope.log
