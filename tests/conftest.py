import os

import pytest

from wsdlgen.xmlimpl import ET
from wsdlgen.xml.node import XmlNode
from wsdlgen.xml.typenode import TypeNode
from wsdlgen.xml.wsdl import WsdlDocument

DATA = os.path.join(os.path.dirname(__file__), 'data')

SCHEMA = '''<xs:schema xmlns:xs="http://www.w3.org/2001/XMLSchema"
    xmlns:tns="urn:test" targetNamespace="urn:test">%s</xs:schema>'''


def data(name):
    return os.path.join(DATA, name)


def type_node(xml, name=None):
    '''TypeNode for the first type in a schema made of xml'''
    root = ET.fromstring(SCHEMA % xml)
    node = XmlNode(root.getroottree(), root[0])
    return TypeNode(node, name or root[0].get('name'))


class FakeClient(object):
    def __init__(self, *signatures):
        self.signatures = list(signatures)

    def list_operation_signatures(self):
        return self.signatures


@pytest.fixture
def users_wsdl():
    return data('users.wsdl')


@pytest.fixture
def imports_wsdl():
    return data('imports.wsdl')


@pytest.fixture
def users(users_wsdl):
    return WsdlDocument(users_wsdl)


@pytest.fixture
def orders(imports_wsdl):
    return WsdlDocument(imports_wsdl)
