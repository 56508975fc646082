#####################################################
#
# node.py
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
#    Wrapper around lxml elements with XPath helpers
#
#####################################################
from wsdlgen.xmlimpl import ET
from wsdlgen.util import ns

class Attributes(object):
    '''
    Read-only view of the attributes of an element.

    Lookups return the value with any namespace prefix removed, so
    type="tns:Foo" reads as "Foo".  Use raw() for the untouched value.
    '''
    def __init__(self, element):
        self._element = element

    def get(self, name, default=None):
        value = self._element.get(name)
        if value is None:
            return default
        return ns.strip(value)

    def raw(self, name, default=None):
        return self._element.get(name, default)

    def __getitem__(self, name):
        value = self.get(name)
        if value is None:
            raise KeyError(name)
        return value

    def __contains__(self, name):
        return name in self._element.attrib

    def __iter__(self):
        return iter(self._element.attrib)

    def __len__(self):
        return len(self._element.attrib)


class XmlNode(object):
    '''
    A node in a WSDL or schema document.

    XmlNode wraps an lxml element together with the document that owns it
    and answers XPath queries with the prefixes "s" (XML Schema) and
    "wsdl" bound to their standard namespaces, independent of the
    prefixes the document itself uses.
    '''
    def __init__(self, document, element):
        self.document = document
        self.element = element
        self.attributes = Attributes(element)

    @property
    def local_name(self):
        return ET.QName(self.element).localname

    @property
    def children(self):
        return [XmlNode(self.document, el) for el in self.element
                if isinstance(el.tag, str)]

    def get(self, name, default=None):
        return self.attributes.get(name, default)

    def xpath(self, query, *args):
        '''
        Run an XPath query relative to this node.

        @type query: str
        @param query: The query.  May contain %s placeholders.
        @param args: Values for the placeholders.  They are inserted as
            quoted XPath string literals.
        @rtype: list of L{XmlNode}
        @return: The matching element nodes, in document order.
        '''
        if args:
            query = query % tuple(literal(a) for a in args)
        result = self.element.xpath(query, namespaces=ns.xpathns)
        return [XmlNode(self.document, el) for el in result
                if ET.iselement(el) and isinstance(el.tag, str)]

    def get_documentation(self):
        '''
        Text of the wsdl:documentation or xs:annotation/xs:documentation
        child, whitespace normalized.  Empty string if there is none.
        '''
        docs = self.xpath('wsdl:documentation|s:annotation/s:documentation')
        if not docs:
            return ''
        text = ''.join(docs[0].element.itertext())
        return ' '.join(text.split())

    def __eq__(self, other):
        return isinstance(other, XmlNode) and self.element is other.element

    def __hash__(self):
        return hash(self.element)

    def __repr__(self):
        return '<%s %s name=%r>' % (self.__class__.__name__, self.local_name,
                self.element.get('name'))


def literal(value):
    '''Quote value as an XPath string literal'''
    value = str(value)
    if "'" not in value:
        return "'%s'" % value
    if '"' not in value:
        return '"%s"' % value
    parts = value.split("'")
    return "concat('%s')" % "', \"'\", '".join(parts)

# VIM options (place at end of file)
# vim: ts=4 sts=4 sw=4 expandtab:
