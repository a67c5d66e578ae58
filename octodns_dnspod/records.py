#
#
#

from .models import RecordEnvelope, RecordListEnvelope
from .payloads import RECORD_REMARK_FIELDS, RECORD_WRITE_FIELDS, record_payload
from .service import DOMAINS_FAILURE, Service

METHOD_RECORD_LIST = 'Record.List'
METHOD_RECORD_CREATE = 'Record.Create'
METHOD_RECORD_INFO = 'Record.Info'
METHOD_RECORD_REMOVE = 'Record.Remove'
METHOD_RECORD_MODIFY = 'Record.Modify'
METHOD_RECORD_REMARK = 'Record.Remark'


class RecordsService(Service):
    """DNS record related methods of the DNSPod API.

    `domain` arguments take either a numeric domain id or a domain name.
    Every operation checks the remote status. On failure the raised
    DnspodStatusError keeps the decoded record in `partial`.
    """

    def list(self, request):
        payload = request.to_payload(self.common)
        response, envelope = self._call(
            METHOD_RECORD_LIST,
            payload,
            RecordListEnvelope,
            failure=DOMAINS_FAILURE,
        )
        return envelope.records, response

    def create(self, domain, record):
        payload = record_payload(
            self.common,
            domain,
            record,
            fields=RECORD_WRITE_FIELDS,
            identify=False,
        )
        return self._record_call(METHOD_RECORD_CREATE, payload)

    def get(self, domain, record_id):
        payload = record_payload(self.common, domain, record_id=record_id)
        return self._record_call(METHOD_RECORD_INFO, payload)

    def update(self, domain, record_id, record):
        payload = record_payload(
            self.common,
            domain,
            record,
            fields=RECORD_WRITE_FIELDS,
            record_id=record_id,
        )
        return self._record_call(METHOD_RECORD_MODIFY, payload)

    def remark(self, domain, record_id, record):
        payload = record_payload(
            self.common,
            domain,
            record,
            fields=RECORD_REMARK_FIELDS,
            record_id=record_id,
        )
        return self._record_call(METHOD_RECORD_REMARK, payload)

    def delete(self, domain, record_id):
        payload = record_payload(self.common, domain, record_id=record_id)
        response, _ = self._call(
            METHOD_RECORD_REMOVE,
            payload,
            RecordEnvelope,
            failure=DOMAINS_FAILURE,
        )
        return response

    def _record_call(self, method, payload):
        response, envelope = self._call(
            method, payload, RecordEnvelope, failure=DOMAINS_FAILURE
        )
        return envelope.record, response
