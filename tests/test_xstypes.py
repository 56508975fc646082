import pytest

from wsdlgen.xsd.types import converter, isprimitive


@pytest.mark.parametrize('typestr, pytype', [
    ('xs:string', 'str'),
    ('xs:token', 'str'),
    ('xs:boolean', 'bool'),
    ('xs:unsignedShort', 'int'),
    ('xs:long', 'int'),
    ('xs:double', 'float'),
    ('xs:decimal', 'float'),
    ('xs:dateTime', 'datetime'),
    ('xs:base64Binary', 'bytes'),
    ('xs:anyType', 'object'),
])
def test_pytype(typestr, pytype):
    assert isprimitive(typestr)
    assert converter(typestr).pytype == pytype


def test_unknown_type():
    assert not isprimitive('xs:nothing')
    assert converter('xs:nothing').pytype == 'object'


def test_checks():
    assert converter('xs:string').check('a')
    assert not converter('xs:string').check(1)
    assert converter('xs:integer').check(1)
    assert not converter('xs:integer').check(True)
    assert converter('xs:integer').fromstr('42') == 42
    assert converter('xs:anyType').check(0)
    assert not converter('xs:anyType').check(None)
