"""Capability groups mixed into :class:`klaw_faker.Generator`.

Grouping is for discoverability only. Every group reads the same engine
reference, so calls from any group advance one shared random stream.
"""

from klaw_faker.groups.address import AddressGroup
from klaw_faker.groups.barcode import BarcodeGroup
from klaw_faker.groups.blood import BloodGroup
from klaw_faker.groups.boolean import BooleanGroup
from klaw_faker.groups.character import CharacterGroup
from klaw_faker.groups.color import ColorGroup
from klaw_faker.groups.company import CompanyGroup
from klaw_faker.groups.decimal import DecimalGroup
from klaw_faker.groups.digit import DigitGroup
from klaw_faker.groups.file import FileGroup
from klaw_faker.groups.hash import HashGroup
from klaw_faker.groups.integer import IntegerGroup
from klaw_faker.groups.internet import InternetGroup
from klaw_faker.groups.iso_code import IsoCodeGroup
from klaw_faker.groups.payment import PaymentGroup
from klaw_faker.groups.person import PersonGroup
from klaw_faker.groups.phone import PhoneGroup
from klaw_faker.groups.text import TextGroup
from klaw_faker.groups.time import TimeGroup
from klaw_faker.groups.user_agent import UserAgentGroup
from klaw_faker.groups.uuid import UuidGroup
from klaw_faker.groups.version import VersionGroup

__all__ = [
    'AddressGroup',
    'BarcodeGroup',
    'BloodGroup',
    'BooleanGroup',
    'CharacterGroup',
    'ColorGroup',
    'CompanyGroup',
    'DecimalGroup',
    'DigitGroup',
    'FileGroup',
    'HashGroup',
    'IntegerGroup',
    'InternetGroup',
    'IsoCodeGroup',
    'PaymentGroup',
    'PersonGroup',
    'PhoneGroup',
    'TextGroup',
    'TimeGroup',
    'UserAgentGroup',
    'UuidGroup',
    'VersionGroup',
]
