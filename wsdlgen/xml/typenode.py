#####################################################
#
# typenode.py
#
# Copyright 2012 Hewlett-Packard Development Company, L.P.
#
# Hewlett-Packard and the Hewlett-Packard logo are trademarks of
# Hewlett-Packard Development Company, L.P. in the U.S. and/or other countries.
#
# This library is free software; you can redistribute it and/or
# modify it under the terms of the GNU Lesser General Public
# License as published by the Free Software Foundation; either
# version 2.1 of the License, or (at your option) any later version.
#
# This library is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with this library; if not, write to the Free Software
# Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA  02110-1301  USA
#
# Author:
#    Chris Frantz
# 
# Description:
#    Introspection of simpleType and complexType definitions
#
#####################################################
from wsdlgen.util import ns
from wsdlgen.util.naming import ucfirst

ARRAY_PREFIX = 'ArrayOf'
ARRAY_MARKER = '[]'

_xs_schema = ns.expand('xs:schema')

def anonymous_type_name(element):
    '''
    Name for the anonymous type of an xs:element.

    The name is the name of the nearest named ancestor of the element
    (looking no further than the enclosing xs:schema) followed by the
    capitalized element name.  Element Bar in the sequence of type Foo
    gives FooBar; a top level element Bar gives Bar.

    @type element: L{ET._Element}
    @param element: The xs:element that has no type attribute.
    '''
    owner = ''
    for parent in element.iterancestors():
        if parent.tag == _xs_schema:
            break
        if parent.get('name'):
            owner = parent.get('name')
            break
    return owner + ucfirst(element.get('name', ''))


class TypeNode(object):
    '''
    A simpleType or complexType from the schema of a WSDL document.

    All the answers are read straight from the wrapped node; a TypeNode
    is never changed after it is created.
    '''
    def __init__(self, node, name, namespace=None, anonymous=False):
        '''
        @type node: L{XmlNode}
        @param node: The xs:simpleType or xs:complexType node.
        @type name: str
        @param name: The name of the type.  For anonymous types, the
            name made up by L{anonymous_type_name}.
        @type namespace: str
        @param namespace: Namespace to use if the enclosing schema has
            no targetNamespace.
        '''
        self.node = node
        self.name = name
        self.namespace = self._schema_namespace() or namespace
        self.anonymous = anonymous
        self.restriction = self._parse_restriction()

    def _schema_namespace(self):
        for parent in self.node.element.iterancestors(_xs_schema):
            return parent.get('targetNamespace')
        return None

    def _parse_restriction(self):
        restrictions = self.node.xpath('s:restriction')
        if restrictions:
            return restrictions[0].get('base', '')
        return ''

    def _elements_named(self, name):
        return self.node.xpath(
                './/s:element[@name=%s or @ref=%s or substring-after(@ref, ":")=%s]',
                name, name, name)

    def is_element_nillable(self, name):
        '''Whether any sub element with this name is nillable'''
        for el in self._elements_named(name):
            if el.attributes.raw('nillable') == 'true':
                return True
        return False

    def is_element_array(self, name):
        '''Whether any sub element with this name may occur more than once'''
        for el in self._elements_named(name):
            max = el.attributes.raw('maxOccurs')
            if max == 'unbounded':
                return True
            try:
                if int(max) >= 2:
                    return True
            except (TypeError, ValueError):
                pass
        return False

    def get_element_min_occurs(self, name):
        '''
        The minOccurs of the first sub element with this name.

        None, not 0, when the attribute is missing.
        '''
        for el in self._elements_named(name):
            min = el.attributes.raw('minOccurs')
            if min is None or min == '':
                return None
            return int(min)
        return None

    def get_base(self):
        '''
        The name of the type this type extends, or None.

        Only complexContent/extension as the first thing in the type counts
        as inheritance.  complexContent/restriction does not.
        '''
        children = [c for c in self.node.children if c.local_name != 'annotation']
        if not children or children[0].local_name != 'complexContent':
            return None
        content = children[0].children
        if content and content[0].local_name == 'extension':
            return content[0].get('base')
        return None

    def get_elements(self):
        '''
        The sub elements of the type.

        @rtype: dict
        @return: Element names mapped to their type names, in document
            order.  Types of elements that may repeat end in "[]".
            An element declared as ref="tns:Foo" is field Foo of type Foo.
        '''
        parts = {}
        elements = self.node.xpath(
                's:sequence/s:element|s:complexContent/s:extension/s:sequence/s:element')
        for el in elements:
            name = el.get('name')
            type = el.get('type')
            if name is None:
                name = type = el.get('ref')
            if name is None:
                continue
            if not type:
                type = anonymous_type_name(el.element)
            if self.is_element_array(name):
                type += ARRAY_MARKER
            parts[name] = type
        return parts

    def get_pattern(self):
        patterns = self.node.xpath('.//s:pattern')
        if patterns:
            return patterns[0].attributes.raw('value')
        return None

    def get_enumerations(self):
        return [el.attributes.raw('value') for el in self.node.xpath('.//s:enumeration')]

    def get_documentation(self):
        return self.node.get_documentation()

    def is_complex(self):
        return self.restriction == 'struct' or self.node.local_name == 'complexType'

    def is_array(self):
        '''
        Whether the type is an array.

        This is a naming convention, not something the schema says:
        array types are complex types named ArrayOf... with exactly one
        element, and that element repeats.  Arrays that don't follow the
        convention are not recognized.
        '''
        if not self.is_complex() or not self.name.startswith(ARRAY_PREFIX):
            return False
        parts = self.get_elements()
        return len(parts) == 1 and list(parts.values())[0].endswith(ARRAY_MARKER)

    def is_abstract(self):
        return self.node.attributes.raw('abstract') == 'true'

    def __repr__(self):
        return '<TypeNode %s %s>' % (self.name, self.node.local_name)

# VIM options (place at end of file)
# vim: ts=4 sts=4 sw=4 expandtab:
