#
# Tests for decoding DNSPod envelopes into models
#

from unittest import TestCase

from octodns_dnspod.models import (
    SUCCESS_CODE,
    Domain,
    DomainEnvelope,
    DomainListEnvelope,
    DomainLogEnvelope,
    Record,
    RecordEnvelope,
    RecordListEnvelope,
    Status,
    to_int,
)


class TestIdentifiers(TestCase):
    def test_numbers_and_strings_both_become_text(self):
        self.assertEqual('12345', Domain.model_validate({'id': 12345}).id)
        self.assertEqual('12345', Domain.model_validate({'id': '12345'}).id)

    def test_null_becomes_empty(self):
        self.assertEqual('', Record.model_validate({'id': None}).id)

    def test_bool_field_untouched(self):
        domain = Domain.model_validate({'auth_to_anquanbao': True})
        self.assertIs(True, domain.auth_to_anquanbao)

    def test_to_int(self):
        self.assertEqual(42, to_int('42'))
        with self.assertRaises(ValueError):
            to_int('')
        with self.assertRaises(ValueError):
            to_int('abc')

    def test_unknown_keys_ignored(self):
        record = Record.model_validate({'id': '1', 'weight': None, 'x': 'y'})
        self.assertEqual('1', record.id)


class TestStatus(TestCase):
    def test_ok(self):
        self.assertTrue(Status(code=SUCCESS_CODE).ok)
        self.assertTrue(Status.model_validate({'code': 1}).ok)
        self.assertFalse(Status(code='0').ok)
        self.assertFalse(Status().ok)


class TestEnvelopes(TestCase):
    def test_domain_list(self):
        envelope = DomainListEnvelope.model_validate(
            {
                'status': {'code': '1', 'message': 'Action completed successful'},
                'info': {'domain_total': 2, 'all_total': '2'},
                'domains': [
                    {'id': 1, 'name': 'unit.tests', 'group_id': '1'},
                    {'id': '2', 'name': 'other.tests', 'records': 5},
                ],
            }
        )
        self.assertTrue(envelope.status.ok)
        self.assertEqual('2', envelope.info.domain_total)
        self.assertEqual(['1', '2'], [d.id for d in envelope.domains])
        self.assertEqual('5', envelope.domains[1].records)
        self.assertIs(envelope.domains, envelope.payload)

    def test_missing_payload_defaults(self):
        envelope = DomainEnvelope.model_validate(
            {'status': {'code': '6', 'message': 'Domain id invalid'}}
        )
        self.assertEqual(Domain(), envelope.domain)
        self.assertEqual('', envelope.info.domain_total)
        self.assertEqual([], RecordListEnvelope.model_validate({}).records)
        self.assertEqual(Record(), RecordEnvelope.model_validate({}).payload)

    def test_log(self):
        envelope = DomainLogEnvelope.model_validate(
            {'status': {'code': '1'}, 'log': ['a', 'b']}
        )
        self.assertEqual(['a', 'b'], envelope.payload)

    def test_record(self):
        envelope = RecordEnvelope.model_validate(
            {
                'status': {'code': '1'},
                'record': {
                    'id': 16894439,
                    'name': 'www',
                    'line': '默认',
                    'line_id': '0',
                    'type': 'A',
                    'ttl': 600,
                    'value': '1.2.3.4',
                    'mx': 0,
                    'enabled': '1',
                },
            }
        )
        record = envelope.record
        self.assertEqual('16894439', record.id)
        self.assertEqual('600', record.ttl)
        self.assertEqual('0', record.mx)
        self.assertEqual('默认', record.line)
