#
#
#

"""Typed views of the JSON envelopes returned by the DNSPod API.

DNSPod is inconsistent about numbers: the same field can come back as a JSON
number in one response and a JSON string in the next. Every text field here
accepts either and stores text; use `to_int` when a number is needed.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

SUCCESS_CODE = '1'


def to_int(value: str) -> int:
    """Convert an identifier-like text field to an int.

    Raises:
        ValueError: if the value is empty or not a decimal number
    """
    return int(value)


class DnspodModel(BaseModel):
    model_config = ConfigDict(extra='ignore')

    @field_validator('*', mode='before')
    @classmethod
    def _coerce_text(cls, value, info):
        field = cls.model_fields[info.field_name]
        if field.annotation is not str:
            return value
        if value is None:
            return ''
        if isinstance(value, bool):
            return '1' if value else '0'
        if isinstance(value, (int, float)):
            return str(value)
        return value


class Status(DnspodModel):
    code: str = ''
    message: str = ''
    created_at: str = ''

    @property
    def ok(self) -> bool:
        return self.code == SUCCESS_CODE


class DomainInfo(DnspodModel):
    domain_total: str = ''
    all_total: str = ''
    mine_total: str = ''
    share_total: str = ''
    vip_total: str = ''
    ismark_total: str = ''
    pause_total: str = ''
    error_total: str = ''
    lock_total: str = ''
    spam_total: str = ''
    vip_expire: str = ''
    share_out_total: str = ''


class Domain(DnspodModel):
    id: str = ''
    name: str = ''
    punycode: str = ''
    grade: str = ''
    grade_title: str = ''
    status: str = ''
    ext_status: str = ''
    records: str = ''
    group_id: str = ''
    is_mark: str = ''
    remark: str = ''
    is_vip: str = ''
    searchengine_push: str = ''
    user_id: str = ''
    created_on: str = ''
    updated_on: str = ''
    ttl: str = ''
    cname_speedup: str = ''
    owner: str = ''
    auth_to_anquanbao: bool = False


class Record(DnspodModel):
    id: str = ''
    name: str = ''
    line: str = ''
    line_id: str = ''
    type: str = ''
    ttl: str = ''
    value: str = ''
    mx: str = ''
    enabled: str = ''
    status: str = ''
    monitor_status: str = ''
    remark: str = ''
    updated_on: str = ''
    use_aqb: str = ''


# --- Envelopes -------------------------------------------------------------


class Envelope(DnspodModel):
    status: Status = Field(default_factory=Status)

    @property
    def payload(self):
        return None


class DomainListEnvelope(Envelope):
    info: DomainInfo = Field(default_factory=DomainInfo)
    domains: List[Domain] = Field(default_factory=list)

    @property
    def payload(self):
        return self.domains


class DomainEnvelope(Envelope):
    info: DomainInfo = Field(default_factory=DomainInfo)
    domain: Domain = Field(default_factory=Domain)

    @property
    def payload(self):
        return self.domain


class DomainLogEnvelope(Envelope):
    log: List[str] = Field(default_factory=list)

    @property
    def payload(self):
        return self.log


class RecordListEnvelope(Envelope):
    info: DomainInfo = Field(default_factory=DomainInfo)
    records: List[Record] = Field(default_factory=list)

    @property
    def payload(self):
        return self.records


class RecordEnvelope(Envelope):
    info: DomainInfo = Field(default_factory=DomainInfo)
    record: Record = Field(default_factory=Record)

    @property
    def payload(self):
        return self.record
