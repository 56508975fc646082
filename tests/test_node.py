from wsdlgen.xmlimpl import ET
from wsdlgen.xml.node import XmlNode, literal

DOC = '''<wsdl:definitions xmlns:wsdl="http://schemas.xmlsoap.org/wsdl/"
    xmlns:x="http://www.w3.org/2001/XMLSchema" xmlns:tns="urn:t">
  <wsdl:documentation>
    A   test
    document
  </wsdl:documentation>
  <x:element name="a" type="tns:A"/>
  <!-- comment -->
  <x:element name="it's" type="x:string"/>
</wsdl:definitions>'''


def root():
    el = ET.fromstring(DOC)
    return XmlNode(el.getroottree(), el)


def test_prefixes_do_not_matter():
    elements = root().xpath('s:element')
    assert [e.get('name') for e in elements] == ['a', "it's"]
    assert elements[0].local_name == 'element'


def test_xpath_arguments_are_quoted():
    assert root().xpath('s:element[@name=%s]', "it's")[0].get('type') == 'string'
    assert root().xpath('s:element[@name=%s]', 'nope') == []


def test_children_are_elements_only():
    assert [c.local_name for c in root().children] == ['documentation', 'element', 'element']


def test_attributes():
    a = root().xpath('s:element')[0].attributes
    assert a.get('type') == 'A'
    assert a.raw('type') == 'tns:A'
    assert a['name'] == 'a'
    assert 'name' in a
    assert 'minOccurs' not in a
    assert a.get('minOccurs', '1') == '1'
    assert sorted(a) == ['name', 'type']
    assert len(a) == 2


def test_documentation():
    assert root().get_documentation() == 'A test document'
    assert root().xpath('s:element')[0].get_documentation() == ''


def test_literal():
    assert literal('a') == "'a'"
    assert literal("it's") == '"it\'s"'
    assert literal('''it's "x"''') == '''concat('it', "'", 's "x"')'''
