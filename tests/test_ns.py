import os

import pytest

from wsdlgen.util import ns
from wsdlgen.xmlimpl import location
from wsdlgen.util.naming import (validate_constant, validate_class_name,
        validate_attribute, validate_unique, ucfirst)


def test_strip():
    assert ns.strip('tns:Foo') == 'Foo'
    assert ns.strip('{urn:foo}Foo') == 'Foo'
    assert ns.strip('Foo') == 'Foo'
    assert ns.strip(None) is None


def test_expand():
    assert ns.expand('xs:int') == '{%s}int' % ns.XS
    assert ns.expand('wsdl:message/wsdl:part') == '{%s}message/{%s}part' % (ns.WSDL, ns.WSDL)
    assert ns.expand('{urn:x}y') == '{urn:x}y'
    assert ns.expand('Foo', targetNamespace='urn:t') == '{urn:t}Foo'


def test_expand_unknown_prefix():
    with pytest.raises(ns.UnknownNamespace):
        ns.expand('nope:Foo')


def test_split():
    assert ns.split('{urn:x}y') == ('urn:x', 'y')
    assert ns.split('xs:string') == (ns.XS, 'string')


@pytest.mark.parametrize('value, name', [
    ('active', 'ACTIVE'),
    ('in progress', 'IN_PROGRESS'),
    ('in-progress', 'IN_PROGRESS'),
    (3, 'VALUE_3'),
    ('', 'VALUE_'),
    ('class', 'VALUE_CLASS'),
])
def test_validate_constant(value, name):
    assert validate_constant(value) == name


def test_validate_class_name():
    assert validate_class_name('person') == 'Person'
    assert validate_class_name('Some-Type') == 'Some_Type'
    assert validate_class_name('3d') == 'Type3d'


def test_validate_attribute():
    assert validate_attribute('first-name') == 'first_name'
    assert validate_attribute('return') == '_return'
    assert validate_attribute('type') == 'type'


def test_validate_unique():
    taken = {'A', 'A2'}
    assert validate_unique('B', lambda n: n not in taken) == 'B'
    assert validate_unique('A', lambda n: n not in taken) == 'A3'


def test_ucfirst():
    assert ucfirst('bar') == 'Bar'
    assert ucfirst('') == ''


def test_location():
    assert location('b.xsd', 'dir/a.wsdl') == os.path.join('dir', 'b.xsd')
    assert location('dir/./a.wsdl') == os.path.join('dir', 'a.wsdl')
    assert location('b.xsd', 'http://example.com/x/a.wsdl') == 'http://example.com/x/b.xsd'
    assert location('http://example.com/b.xsd', 'dir/a.wsdl') == 'http://example.com/b.xsd'
