from conftest import type_node

PERSON = '''
<xs:complexType name="Person">
  <xs:sequence>
    <xs:element name="name" type="xs:string"/>
    <xs:element name="nick" type="xs:string" minOccurs="0" nillable="true"/>
    <xs:element name="phones" type="tns:Phone" minOccurs="1" maxOccurs="unbounded"/>
    <xs:element name="pets" type="xs:string" maxOccurs="2"/>
    <xs:element name="boss" type="tns:Person" maxOccurs="1"/>
  </xs:sequence>
</xs:complexType>
'''

EMPLOYEE = '''
<xs:complexType name="Employee">
  <xs:annotation><xs:documentation>Works here</xs:documentation></xs:annotation>
  <xs:complexContent>
    <xs:extension base="tns:Person">
      <xs:sequence>
        <xs:element name="salary" type="xs:decimal"/>
      </xs:sequence>
    </xs:extension>
  </xs:complexContent>
</xs:complexType>
'''


def test_elements():
    t = type_node(PERSON)
    assert t.get_elements() == {
        'name': 'string',
        'nick': 'string',
        'phones': 'Phone[]',
        'pets': 'string[]',
        'boss': 'Person',
    }
    assert list(t.get_elements()) == ['name', 'nick', 'phones', 'pets', 'boss']


def test_element_facts():
    t = type_node(PERSON)
    assert t.is_element_array('phones')
    assert t.is_element_array('pets')
    assert not t.is_element_array('boss')
    assert not t.is_element_array('missing')
    assert t.is_element_nillable('nick')
    assert not t.is_element_nillable('name')


def test_min_occurs_absent_is_not_zero():
    t = type_node(PERSON)
    assert t.get_element_min_occurs('name') is None
    assert t.get_element_min_occurs('nick') == 0
    assert t.get_element_min_occurs('phones') == 1
    assert t.get_element_min_occurs('missing') is None


def test_base():
    assert type_node(EMPLOYEE).get_base() == 'Person'
    assert type_node(PERSON).get_base() is None


def test_extension_elements():
    assert type_node(EMPLOYEE).get_elements() == {'salary': 'decimal'}


def test_restriction_content_is_not_inheritance():
    t = type_node('''
    <xs:complexType name="ArrayOfString">
      <xs:complexContent>
        <xs:restriction base="soapenc:Array"/>
      </xs:complexContent>
    </xs:complexType>''')
    assert t.get_base() is None
    assert t.is_complex()
    assert not t.is_array()


def test_anonymous_element_type_name():
    t = type_node('''
    <xs:complexType name="Foo">
      <xs:sequence>
        <xs:element name="bar">
          <xs:complexType>
            <xs:sequence><xs:element name="x" type="xs:int"/></xs:sequence>
          </xs:complexType>
        </xs:element>
      </xs:sequence>
    </xs:complexType>''')
    assert t.get_elements() == {'bar': 'FooBar'}


def test_array():
    t = type_node('''
    <xs:complexType name="ArrayOfPerson">
      <xs:sequence>
        <xs:element name="Person" type="tns:Person" maxOccurs="unbounded"/>
      </xs:sequence>
    </xs:complexType>''')
    assert t.is_array()
    assert t.is_complex()


def test_array_needs_the_naming_convention():
    t = type_node('''
    <xs:complexType name="People">
      <xs:sequence>
        <xs:element name="Person" type="tns:Person" maxOccurs="unbounded"/>
      </xs:sequence>
    </xs:complexType>''')
    assert not t.is_array()


def test_array_needs_a_repeating_element():
    t = type_node('''
    <xs:complexType name="ArrayOfPerson">
      <xs:sequence>
        <xs:element name="Person" type="tns:Person"/>
      </xs:sequence>
    </xs:complexType>''')
    assert not t.is_array()


def test_simple_type():
    t = type_node('''
    <xs:simpleType name="Color">
      <xs:restriction base="xs:string">
        <xs:pattern value="#[0-9a-f]{6}"/>
        <xs:pattern value="ignored"/>
        <xs:enumeration value="#ffffff"/>
        <xs:enumeration value="#000000"/>
      </xs:restriction>
    </xs:simpleType>''')
    assert t.restriction == 'string'
    assert not t.is_complex()
    assert not t.is_array()
    assert t.get_pattern() == '#[0-9a-f]{6}'
    assert t.get_enumerations() == ['#ffffff', '#000000']


def test_missing_facets():
    t = type_node(PERSON)
    assert t.restriction == ''
    assert t.get_pattern() is None
    assert t.get_enumerations() == []


def test_struct_restriction_is_complex():
    t = type_node('''
    <xs:simpleType name="Blob">
      <xs:restriction base="tns:struct"/>
    </xs:simpleType>''')
    assert t.is_complex()


def test_abstract():
    assert type_node('<xs:complexType name="A" abstract="true"/>').is_abstract()
    assert not type_node('<xs:complexType name="A" abstract="false"/>').is_abstract()
    assert not type_node('<xs:complexType name="A"/>').is_abstract()


def test_namespace_and_documentation():
    t = type_node(EMPLOYEE)
    assert t.namespace == 'urn:test'
    assert t.get_documentation() == 'Works here'
    assert not t.anonymous


def test_referenced_elements():
    t = type_node('''
    <xs:complexType name="Foo">
      <xs:sequence>
        <xs:element ref="tns:Bar" minOccurs="0" maxOccurs="unbounded"/>
        <xs:element name="x" type="xs:int"/>
      </xs:sequence>
    </xs:complexType>''')
    assert t.get_elements() == {'Bar': 'Bar[]', 'x': 'int'}
    assert t.is_element_array('Bar')
    assert t.get_element_min_occurs('Bar') == 0
    assert not t.is_element_array('x')
