#
#
#

"""Form payload builders for DNSPod requests.

Every request type renders to a flat, insertion-ordered dict of strings.
Fields left at their empty value are omitted entirely: the API treats an
omitted field differently from one sent as an empty string.
"""

from dataclasses import dataclass
from typing import Dict, Optional

Payload = Dict[str, str]


def _is_empty(value) -> bool:
    return value is None or value == '' or value == 0


def set_if(payload: Payload, key: str, value) -> Payload:
    """Add `key` to `payload` when `value` is non-empty."""
    if not _is_empty(value):
        payload[key] = str(value)
    return payload


def set_either(
    payload: Payload, id_key: str, id_value, name_key: str, name_value
) -> Payload:
    """Add the id form when present, else the name form, never both."""
    if not _is_empty(id_value):
        payload[id_key] = str(id_value)
    else:
        set_if(payload, name_key, name_value)
    return payload


def set_domain(payload: Payload, domain) -> Payload:
    """Identify a domain by a free-form value.

    All-digit values are domain ids, anything else is a domain name.
    """
    domain = '' if domain is None else str(domain)
    if domain.isdigit():
        return set_if(payload, 'domain_id', domain)
    return set_if(payload, 'domain', domain)


@dataclass(frozen=True)
class CommonParams:
    """Parameters attached to every request ahead of the operation fields."""

    login_token: str
    format: str = 'json'
    lang: str = ''
    error_on_empty: str = ''
    user_id: str = ''

    def to_payload(self) -> Payload:
        payload = {'login_token': self.login_token, 'format': self.format}
        set_if(payload, 'lang', self.lang)
        set_if(payload, 'error_on_empty', self.error_on_empty)
        set_if(payload, 'user_id', self.user_id)
        return payload

    def __repr__(self):
        return f'CommonParams(login_token=***, format={self.format!r})'


@dataclass
class DomainListRequest:
    type: str = ''
    offset: str = ''
    length: str = ''
    group_id: str = ''
    keyword: str = ''

    def to_payload(self, common: CommonParams) -> Payload:
        payload = common.to_payload()
        set_if(payload, 'type', self.type)
        set_if(payload, 'offset', self.offset)
        set_if(payload, 'length', self.length)
        set_if(payload, 'group_id', self.group_id)
        set_if(payload, 'keyword', self.keyword)
        return payload


@dataclass
class DomainLogRequest:
    domain_id: str = ''
    domain: str = ''
    offset: str = ''
    length: str = ''

    def to_payload(self, common: CommonParams) -> Payload:
        payload = common.to_payload()
        set_either(payload, 'domain_id', self.domain_id, 'domain', self.domain)
        set_if(payload, 'offset', self.offset)
        set_if(payload, 'length', self.length)
        return payload


@dataclass
class RecordListRequest:
    domain_id: str = ''
    domain: str = ''
    offset: str = ''
    length: str = ''
    sub_domain: str = ''
    record_type: str = ''
    record_line: str = ''
    record_line_id: str = ''
    keyword: str = ''

    def to_payload(self, common: CommonParams) -> Payload:
        payload = common.to_payload()
        set_either(payload, 'domain_id', self.domain_id, 'domain', self.domain)
        set_if(payload, 'offset', self.offset)
        set_if(payload, 'length', self.length)
        set_if(payload, 'sub_domain', self.sub_domain)
        set_if(payload, 'record_type', self.record_type)
        set_either(
            payload,
            'record_line_id',
            self.record_line_id,
            'record_line',
            self.record_line,
        )
        set_if(payload, 'keyword', self.keyword)
        return payload


def record_payload(
    common: CommonParams,
    domain,
    record=None,
    fields=(),
    record_id: Optional[str] = None,
    identify: bool = True,
) -> Payload:
    """Payload for the single-record operations.

    When `identify` is set the template's own id wins over the separately
    passed `record_id`. Only the template attributes named in `fields` are
    copied, each under its wire name.
    """
    payload = set_domain(common.to_payload(), domain)
    if identify:
        if record is not None and record.id:
            payload['record_id'] = record.id
        else:
            set_if(payload, 'record_id', record_id)
    for attr, key in fields:
        set_if(payload, key, getattr(record, attr))
    return payload


# template attribute -> wire name
RECORD_WRITE_FIELDS = (
    ('name', 'sub_domain'),
    ('type', 'record_type'),
    ('line', 'record_line'),
    ('line_id', 'record_line_id'),
    ('value', 'value'),
    ('mx', 'mx'),
    ('ttl', 'ttl'),
    ('status', 'status'),
)

RECORD_REMARK_FIELDS = (('remark', 'remark'),)
