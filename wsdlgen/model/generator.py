#####################################################
#
# generator.py
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
#    Build the models of the types and the service from a WSDL
#
#####################################################
from wsdlgen.xml.wsdl import WsdlDocument
from wsdlgen.model.types import SimpleType, Pattern, ComplexType, ArrayType, Variable
from wsdlgen.model.enum import Enum
from wsdlgen.model.service import Service, Operation
from wsdlgen.xsd.types import converter, isprimitive
from wsdlgen.util.naming import validate_unique

from logging import getLogger
log=getLogger(__name__)

class Generator(object):
    '''
    A Generator reads a WSDL document and builds the models of its types
    and of the service.  The class declarations of the models are what
    gets written out.

        gen = Generator(Config('http://example.com/service?wsdl')).load()
        for cls in gen.classes():
            print(cls)
    '''
    def __init__(self, config):
        self.config = config
        self.document = None
        self.types = {}
        self.service = None
        self._identifiers = set()

    def load(self, document=None):
        '''
        Load the document and build the models.

        @type document: L{WsdlDocument}
        @param document: Optional.  An already loaded document.  By default
            the input file of the configuration is loaded.
        @raise LoadError: The document can't be loaded.
        @raise ValidationError: An enumeration value doesn't match the
            datatype of its enumeration.
        '''
        if document is None:
            document = WsdlDocument(self.config.input_file)
        self.document = document
        self._load_types(document.get_types())
        self._load_service(document.get_service(), document.get_operations())
        return self

    def _unique(self, identifier):
        identifier = validate_unique(identifier, lambda n: n not in self._identifiers)
        self._identifiers.add(identifier)
        return identifier

    def _make_type(self, node):
        kwargs = {
            'namespace': node.namespace,
            'doc': node.get_documentation(),
            'resolver': self.resolve_type,
        }
        if node.is_array():
            return ArrayType(node.name, abstract=node.is_abstract(), patterns=self.pattern, **kwargs)
        if node.is_complex():
            return ComplexType(node.name, abstract=node.is_abstract(), patterns=self.pattern, **kwargs)

        enumerations = node.get_enumerations()
        if enumerations:
            t = Enum(node.name, node.restriction, **kwargs)
            for value in enumerations:
                t.add_value(value)
            return t
        pattern = node.get_pattern()
        if pattern is not None:
            return Pattern(node.name, node.restriction, pattern, **kwargs)
        return SimpleType(node.name, node.restriction, **kwargs)

    def _load_types(self, nodes):
        complex = []
        for node in nodes:
            if node.name in self.types:
                log.debug('Type %s is defined twice, keeping the first', node.name)
                continue
            t = self._make_type(node)
            t.package = self.config.namespace_name
            if t.produces_class():
                t.identifier = self._unique(t.identifier)
            self.types[node.name] = t
            log.debug('Loaded %r', t)
            if isinstance(t, ComplexType):
                complex.append((node, t))

        # Members and base types can refer to types defined later in the
        # document, so they are only set once every type is known
        for (node, t) in complex:
            base = self.types.get(node.get_base())
            if isinstance(base, ComplexType):
                if self._extends(base, t):
                    log.debug('Type %s would inherit from itself through %s, ignoring its base',
                            t.name, base.name)
                else:
                    t.base_type = base
            for (name, type) in node.get_elements().items():
                t.add_member(Variable(name, type,
                    nillable=node.is_element_nillable(name),
                    min_occurs=node.get_element_min_occurs(name)))

    @staticmethod
    def _extends(t, other):
        '''Whether t is other or inherits from it'''
        while t is not None:
            if t is other:
                return True
            t = t.base_type
        return False

    def _load_service(self, node, operations):
        name = None
        doc = ''
        if node is not None:
            name = node.name
            doc = node.get_documentation()
        service = Service(name, self.config, self.types.values(), doc=doc,
                resolver=self.resolve_type)
        service.package = self.config.namespace_name
        service.identifier = self._unique(service.identifier)
        for op in operations:
            service.add_operation(Operation(op.name, op.params, op.returns,
                op.get_documentation(), resolver=self.resolve_type))
        self.service = service

    def resolve_type(self, typename):
        '''
        The type to declare for a schema type name.

        Types that have a class resolve to the class identifier.  Simple
        types resolve to the type they restrict, down to an xs: type,
        which resolves to its python type.  Anything else is an object.

        @type typename: str
        @param typename: Name of the type, without namespace.  A trailing
            "[]" means an array of the type.
        @rtype: tuple
        @return: (type name, is array)
        '''
        is_array = typename.endswith('[]')
        if is_array:
            typename = typename[:-2]

        seen = set()
        t = self.types.get(typename)
        while t is not None and not t.produces_class() and typename not in seen:
            seen.add(typename)
            typename = t.datatype
            t = self.types.get(typename)

        if t is not None and t.produces_class():
            return (t.identifier, is_array)
        if isprimitive('xs:' + typename):
            return (converter('xs:' + typename).pytype, is_array)
        return ('object', is_array)

    def pattern(self, typename):
        '''The pattern restricting a schema type, or None'''
        if typename.endswith('[]'):
            typename = typename[:-2]
        t = self.types.get(typename)
        if isinstance(t, Pattern):
            return t.pattern
        return None

    def classes(self):
        '''
        The class declarations of every type that has one, in document
        order, followed by the one of the service.
        '''
        ret = [t.get_class() for t in self.types.values() if t.produces_class()]
        if self.service is not None:
            ret.append(self.service.get_class())
        return ret

# VIM options (place at end of file)
# vim: ts=4 sts=4 sw=4 expandtab:
