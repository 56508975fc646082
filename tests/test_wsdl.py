import os
from urllib.error import HTTPError

import pytest

from wsdlgen.exceptions import LoadError
from wsdlgen.xml.wsdl import WsdlDocument
from wsdlgen.xml.schema import SchemaDocument
from wsdlgen.xml.operation import OperationNode

from conftest import data, FakeClient


def test_types_named_first(users):
    names = [t.name for t in users.get_types()]
    assert names == [
        'Status', 'Priority', 'Email', 'UserId', 'Person', 'Employee',
        'ArrayOfEmployee', 'Team',
        'EmployeeAddress', 'GetEmployee', 'GetEmployeeResponse',
        'ListEmployees', 'ListEmployeesResponse',
    ]


def test_anonymous_types(users):
    types = dict((t.name, t) for t in users.get_types())
    assert types['EmployeeAddress'].anonymous
    assert not types['Employee'].anonymous
    # The member refers to the anonymous type by the same name
    assert types['Employee'].get_elements()['address'] == 'EmployeeAddress'
    assert types['EmployeeAddress'].get_elements() == {'street': 'string', 'city': 'string'}


def test_namespace(users):
    assert users.namespace == 'urn:users'
    assert all(t.namespace == 'urn:users' for t in users.get_types())


def test_service(users):
    service = users.get_service()
    assert service.name == 'UserService'
    assert service.get_documentation() == 'Looks after the employees'


def test_documentation(users):
    types = dict((t.name, t) for t in users.get_types())
    assert types['Person'].get_documentation() == 'Somebody the service knows about'
    assert types['Employee'].get_documentation() == ''


def test_operations(users):
    operations = users.get_operations()
    assert [op.name for op in operations] == ['GetEmployee', 'ListEmployees']
    op = operations[0]
    assert op.returns == 'GetEmployeeResponse'
    assert op.params == {'parameters': 'GetEmployee'}
    assert op.get_documentation() == 'Fetch one employee'
    assert operations[1].get_documentation() == ''


def test_operations_need_a_wsdl_node(users_wsdl):
    client = FakeClient(
        'GetEmployeeResponse GetEmployee(GetEmployee $parameters)',
        'string Unknown(string x)',
        'not a signature',
        'GetEmployeeResponse GetEmployee(GetEmployee $parameters)',
    )
    doc = WsdlDocument(users_wsdl, client=client)
    operations = doc.get_operations()
    assert [op.name for op in operations] == ['GetEmployee']
    assert operations[0].params == {'parameters': 'GetEmployee'}


def test_no_service():
    doc = WsdlDocument(data('common.xsd'), client=FakeClient())
    assert doc.get_service() is None
    assert doc.namespace is None
    assert doc.get_operations() == []


def test_imports_and_includes(orders):
    assert [os.path.basename(d.docinfo.URL) for d in orders.documents] == [
        'imports.wsdl', 'common.xsd', 'lines.xsd']
    types = orders.get_types()
    assert [t.name for t in types] == ['Order', 'Currency', 'Line', 'ArrayOfLine']
    assert [t.namespace for t in types] == ['urn:orders', 'urn:common', 'urn:common', 'urn:common']


def test_schema_include():
    doc = SchemaDocument(data('common.xsd'))
    assert len(doc.documents) == 2


def test_missing_file():
    with pytest.raises(LoadError) as info:
        WsdlDocument(data('missing.wsdl'))
    assert info.value.status is None
    assert info.value.cause is not None


def test_broken_xml():
    with pytest.raises(LoadError):
        WsdlDocument(data('broken.wsdl'))


def test_operations_unreadable():
    with pytest.raises(LoadError) as info:
        WsdlDocument(data('nobinding.wsdl'))
    assert 'operations' in str(info.value)
    assert isinstance(info.value.cause, KeyError)


def test_http_error(monkeypatch):
    url = 'http://example.com/service?wsdl'

    def urlopen(source):
        raise HTTPError(source, 404, 'Not Found', {}, None)

    monkeypatch.setattr('wsdlgen.xmlimpl.urlopen', urlopen)
    with pytest.raises(LoadError) as info:
        WsdlDocument(url)
    assert info.value.status == 404
    assert str(info.value).endswith('(status 404)')
    assert 'Not Found' in str(info.value)


def test_parse_signature():
    assert OperationNode.parse('void Ping()') == ('void', 'Ping', {})
    assert OperationNode.parse('long Add(int $a, int b)') == ('long', 'Add', {'a': 'int', 'b': 'int'})
    with pytest.raises(ValueError):
        OperationNode.parse('Add(int a)')


def test_circular_import_loads_root_once(tmp_path):
    wsdl = '''<wsdl:definitions xmlns:wsdl="http://schemas.xmlsoap.org/wsdl/">
  <wsdl:import namespace="urn:x" location="%s"/>
</wsdl:definitions>'''
    (tmp_path / 'a.wsdl').write_text(wsdl % 'b.wsdl')
    (tmp_path / 'b.wsdl').write_text(wsdl % 'a.wsdl')
    doc = SchemaDocument(os.path.join(str(tmp_path), '.', 'a.wsdl'))
    assert doc.url == os.path.join(str(tmp_path), 'a.wsdl')
    assert len(doc.documents) == 2
