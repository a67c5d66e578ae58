#
#
#

import logging
import shlex
from collections import defaultdict

from octodns.provider.base import BaseProvider
from octodns.record import Record

__version__ = '0.1.0'

from .client import DnspodClient  # noqa: E402
from .exceptions import (  # noqa: E402
    DnspodClientDecodeError,
    DnspodClientException,
    DnspodClientNotFound,
    DnspodClientUnauthorized,
    DnspodStatusError,
)
from .models import Domain, to_int  # noqa: E402
from .models import Record as DnspodRecord  # noqa: E402
from .payloads import (  # noqa: E402
    CommonParams,
    DomainListRequest,
    DomainLogRequest,
    RecordListRequest,
)

__all__ = [
    'CommonParams',
    'DnspodClient',
    'DnspodClientDecodeError',
    'DnspodClientException',
    'DnspodClientNotFound',
    'DnspodClientUnauthorized',
    'DnspodProvider',
    'DnspodStatusError',
    'DomainListRequest',
    'DomainLogRequest',
    'RecordListRequest',
]

# Remote status codes for "nothing matched" on the list methods
NO_DOMAINS_CODE = '9'
NO_RECORDS_CODE = '10'

DEFAULT_LINE = '默认'
DEFAULT_LINE_ID = '0'
DEFAULT_TTL = 600
# Largest page the list methods accept
LIST_LENGTH = '3000'


class DnspodProvider(BaseProvider):
    SUPPORTS_GEO = False
    SUPPORTS_DYNAMIC = False
    SUPPORTS_ROOT_NS = False
    SUPPORTS = set(('A', 'AAAA', 'CAA', 'CNAME', 'MX', 'NS', 'SRV', 'TXT'))

    def __init__(self, id, login_token, *args, **kwargs):
        self.log = logging.getLogger(f'DnspodProvider[{id}]')
        lang = kwargs.pop('lang', '')
        timeout = kwargs.pop('timeout', DnspodClient.DEFAULT_TIMEOUT)
        self.log.debug(
            '__init__: id=%s, login_token=***, lang=%s, timeout=%s',
            id,
            lang,
            timeout,
        )
        super().__init__(id, *args, **kwargs)

        self._client = DnspodClient(login_token, lang=lang, timeout=timeout)

        self._zone_records = {}
        self._zone_metadata = {}

    def _append_dot(self, value):
        if value == '@' or value[-1] == '.':
            return value
        return f'{value}.'

    def zone_metadata(self, zone_name):
        if zone_name not in self._zone_metadata:
            name = zone_name[:-1]
            request = DomainListRequest(keyword=name, length=LIST_LENGTH)
            try:
                domains, _ = self._client.domains.list(request)
            except DnspodStatusError as e:
                if e.code != NO_DOMAINS_CODE:
                    raise
                domains = []
            for domain in domains:
                if domain.name == name:
                    break
            else:
                raise DnspodClientNotFound()
            self._zone_metadata[zone_name] = domain

        return self._zone_metadata[zone_name]

    def _record_ttl(self, zone, record):
        if record.ttl:
            return to_int(record.ttl)
        default_ttl = self.zone_metadata(zone.name).ttl
        return to_int(default_ttl) if default_ttl else DEFAULT_TTL

    def _data_for_multiple(self, zone, _type, records):
        values = [record.value.replace(';', '\\;') for record in records]
        return {
            'ttl': self._record_ttl(zone, records[0]),
            'type': _type,
            'values': values,
        }

    _data_for_A = _data_for_multiple
    _data_for_AAAA = _data_for_multiple
    _data_for_TXT = _data_for_multiple

    def _data_for_CAA(self, zone, _type, records):
        values = []
        for record in records:
            raw = record.value
            try:
                flags, tag, value = shlex.split(raw)[:3]
                values.append({'flags': int(flags), 'tag': tag, 'value': value})
            except ValueError as e:
                self.log.warning(
                    '_data_for_CAA: failed to parse CAA record %r: %s, '
                    'using fallback values (flags=0, tag=issue)',
                    raw,
                    e,
                )
                values.append({'flags': 0, 'tag': 'issue', 'value': raw})
        return {
            'ttl': self._record_ttl(zone, records[0]),
            'type': _type,
            'values': values,
        }

    def _data_for_CNAME(self, zone, _type, records):
        record = records[0]
        return {
            'ttl': self._record_ttl(zone, record),
            'type': _type,
            'value': self._append_dot(record.value),
        }

    def _data_for_MX(self, zone, _type, records):
        values = []
        for record in records:
            values.append(
                {
                    'preference': to_int(record.mx),
                    'exchange': self._append_dot(record.value.strip()),
                }
            )
        return {
            'ttl': self._record_ttl(zone, records[0]),
            'type': _type,
            'values': values,
        }

    def _data_for_NS(self, zone, _type, records):
        values = [self._append_dot(record.value) for record in records]
        return {
            'ttl': self._record_ttl(zone, records[0]),
            'type': _type,
            'values': values,
        }

    def _data_for_SRV(self, zone, _type, records):
        values = []
        for record in records:
            try:
                priority, weight, port, target = record.value.split()
                values.append(
                    {
                        'port': int(port),
                        'priority': int(priority),
                        'target': self._append_dot(target),
                        'weight': int(weight),
                    }
                )
            except ValueError as e:
                self.log.warning(
                    '_data_for_SRV: skipping unparsable SRV value %r: %s',
                    record.value,
                    e,
                )
        return {
            'ttl': self._record_ttl(zone, records[0]),
            'type': _type,
            'values': values,
        }

    def list_zones(self):
        self.log.debug('list_zones:')
        try:
            domains, _ = self._client.domains.list(
                DomainListRequest(length=LIST_LENGTH)
            )
        except DnspodStatusError as e:
            if e.code != NO_DOMAINS_CODE:
                raise
            domains = []
        return sorted(f'{d.name}.' for d in domains if d.name)

    def zone_records(self, zone):
        if zone.name not in self._zone_records:
            try:
                domain_id = self.zone_metadata(zone.name).id
                records, _ = self._client.records.list(
                    RecordListRequest(domain_id=domain_id, length=LIST_LENGTH)
                )
            except DnspodClientNotFound:
                return []
            except DnspodStatusError as e:
                if e.code != NO_RECORDS_CODE:
                    raise
                records = []
            for record in records:
                if record.name == '@':
                    record.name = ''
            self._zone_records[zone.name] = records

        return self._zone_records[zone.name]

    def _is_default_line(self, record):
        if record.line_id:
            return record.line_id == DEFAULT_LINE_ID
        return record.line in ('', DEFAULT_LINE)

    def populate(self, zone, target=False, lenient=False):
        self.log.debug(
            'populate: name=%s, target=%s, lenient=%s',
            zone.name,
            target,
            lenient,
        )

        values = defaultdict(lambda: defaultdict(list))
        for record in self.zone_records(zone):
            _type = record.type
            if _type not in self.SUPPORTS:
                self.log.warning(
                    'populate: skipping unsupported %s record', _type
                )
                continue
            if _type == 'NS' and record.name == '':
                # apex NS records are managed by DNSPod
                continue
            if not self._is_default_line(record):
                self.log.warning(
                    'populate: skipping %s record %s on line %s',
                    _type,
                    record.name,
                    record.line,
                )
                continue
            values[record.name][_type].append(record)

        before = len(zone.records)
        for name, types in values.items():
            for _type, records in types.items():
                data_for = getattr(self, f'_data_for_{_type}')
                data = data_for(zone, _type, records)
                if 'values' in data and not data['values']:
                    # nothing parsable left
                    continue
                record = Record.new(
                    zone, name, data, source=self, lenient=lenient
                )
                zone.add_record(record, lenient=lenient)

        exists = zone.name in self._zone_records
        self.log.info(
            'populate:   found %s records, exists=%s',
            len(zone.records) - before,
            exists,
        )
        return exists

    def _params_for_multiple(self, record):
        for value in record.values:
            yield {
                'value': value.replace('\\;', ';'),
                'name': record.name,
                'ttl': record.ttl,
                'type': record._type,
            }

    _params_for_A = _params_for_multiple
    _params_for_AAAA = _params_for_multiple
    _params_for_NS = _params_for_multiple
    _params_for_TXT = _params_for_multiple

    def _params_for_CAA(self, record):
        for value in record.values:
            yield {
                'value': f'{value.flags} {value.tag} "{value.value}"',
                'name': record.name,
                'ttl': record.ttl,
                'type': record._type,
            }

    def _params_for_CNAME(self, record):
        yield {
            'value': record.value,
            'name': record.name,
            'ttl': record.ttl,
            'type': record._type,
        }

    def _params_for_MX(self, record):
        for value in record.values:
            yield {
                'value': value.exchange,
                'mx': value.preference,
                'name': record.name,
                'ttl': record.ttl,
                'type': record._type,
            }

    def _params_for_SRV(self, record):
        for value in record.values:
            yield {
                'value': (
                    f'{value.priority} {value.weight} {value.port} '
                    f'{value.target}'
                ),
                'name': record.name,
                'ttl': record.ttl,
                'type': record._type,
            }

    def _template(self, params):
        return DnspodRecord(
            name=params['name'] or '@',
            type=params['type'],
            value=params['value'],
            mx=params.get('mx', ''),
            ttl=params['ttl'],
            line=DEFAULT_LINE,
            line_id=DEFAULT_LINE_ID,
        )

    def _existing_records(self, existing):
        return [
            r
            for r in self.zone_records(existing.zone)
            if r.name == existing.name
            and r.type == existing._type
            and self._is_default_line(r)
        ]

    def _apply_Create(self, domain_id, change):
        new = change.new
        params_for = getattr(self, f'_params_for_{new._type}')
        for params in params_for(new):
            self._client.records.create(domain_id, self._template(params))

    def _apply_Update(self, domain_id, change):
        new = change.new
        params_for = getattr(self, f'_params_for_{new._type}')
        templates = [self._template(p) for p in params_for(new)]
        existing = self._existing_records(change.existing)

        # Records already holding a wanted value keep it, only their ttl may
        # change. DNSPod rejects duplicate values on a name/type/line, so only
        # the leftovers are modified in place, then the difference is removed
        # or added.
        unmatched = []
        for record in existing:
            template = self._matching_template(record, templates)
            if template is None:
                unmatched.append(record)
                continue
            templates.remove(template)
            if record.ttl != template.ttl:
                self._client.records.update(domain_id, record.id, template)
        for record, template in zip(unmatched, templates):
            self._client.records.update(domain_id, record.id, template)
        for record in unmatched[len(templates) :]:
            self._client.records.delete(domain_id, record.id)
        for template in templates[len(unmatched) :]:
            self._client.records.create(domain_id, template)

    def _matching_template(self, record, templates):
        for template in templates:
            if template.value != record.value:
                continue
            if record.type == 'MX' and template.mx != record.mx:
                continue
            return template
        return None

    def _apply_Delete(self, domain_id, change):
        for record in self._existing_records(change.existing):
            self._client.records.delete(domain_id, record.id)

    def _apply(self, plan):
        desired = plan.desired
        changes = plan.changes
        self.log.debug(
            '_apply: zone=%s, len(changes)=%d', desired.name, len(changes)
        )

        try:
            domain_id = self.zone_metadata(desired.name).id
        except DnspodClientNotFound:
            self.log.debug('_apply:   no matching zone, creating domain')
            # Domain.Create does not report failure through an exception
            domain, _ = self._client.domains.create(
                Domain(name=desired.name[:-1])
            )
            if not domain.id:
                raise DnspodClientException(
                    f'could not create domain {desired.name}'
                )
            domain_id = domain.id

        for change in changes:
            class_name = change.__class__.__name__
            getattr(self, f'_apply_{class_name}')(domain_id, change)

        # Clear out the cache if any
        self._zone_records.pop(desired.name, None)
