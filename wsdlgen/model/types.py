#####################################################
#
# types.py
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
#    Models of the schema types and the classes they produce
#
#####################################################
from enum import Enum as _Enum

from wsdlgen.code import ClassDecl, Field, Method, Parameter
from wsdlgen.exceptions import AlreadyBuiltError
from wsdlgen.util.naming import validate_class_name, validate_attribute, validate_unique

from logging import getLogger
log=getLogger(__name__)

class State(_Enum):
    UNBUILT = 'unbuilt'
    BUILT = 'built'

def unresolved(typename):
    return (typename, False)

class Type(object):
    '''
    Base class of the types generated from the schema.

    A type builds its class declaration once.  get_class() builds it on
    first use; generate_class() builds it and refuses to do it twice.
    '''
    def __init__(self, name, datatype='', namespace=None, doc='', resolver=None):
        '''
        @type name: str
        @param name: The name of the type in the schema.
        @type datatype: str
        @param datatype: The restriction base of the type, if any.
        @type resolver: callable
        @param resolver: Optional.  Maps a schema type name to a tuple of
            (type name to declare, is array).
        '''
        self.name = name
        self.datatype = datatype
        self.namespace = namespace
        self.doc = doc
        self.identifier = validate_class_name(name)
        self.package = ''
        self.resolver = resolver or unresolved
        self.state = State.UNBUILT
        self._class = None

    def produces_class(self):
        return True

    def generate_class(self):
        if self.state is State.BUILT:
            raise AlreadyBuiltError('The class has already been generated', self.name)
        self._class = self._build()
        self.state = State.BUILT
        log.debug('Built %s for type %s', self.identifier, self.name)
        return self._class

    def get_class(self):
        if self.state is State.UNBUILT:
            self.generate_class()
        return self._class

    def _build(self):
        raise NotImplementedError

    def __repr__(self):
        return '<%s %s>' % (self.__class__.__name__, self.name)


class SimpleType(Type):
    '''
    A restriction of another type that adds nothing worth a class of its
    own.  Fields of this type are declared with the restricted type.
    '''
    def produces_class(self):
        return False

    def _build(self):
        return None

class Pattern(SimpleType):
    '''A simple type restricted by a regular expression'''
    def __init__(self, name, datatype, pattern, **kwargs):
        SimpleType.__init__(self, name, datatype, **kwargs)
        self.pattern = pattern


class Variable(object):
    '''A member of a complex type, as the schema describes it'''
    def __init__(self, name, type, nillable=False, min_occurs=None):
        self.name = name
        self.is_array = type.endswith('[]')
        self.type = type[:-2] if self.is_array else type
        self.nillable = nillable
        self.min_occurs = min_occurs

    @property
    def nullable(self):
        return self.nillable or self.min_occurs == 0

    def __repr__(self):
        return '<Variable %s: %s>' % (self.name, self.type)


class ComplexType(Type):
    '''
    A type with sub elements.  Its class has a field for each element,
    a getter and a setter for each field and a constructor taking the
    fields that must have a value, including those of the base type.
    '''
    def __init__(self, name, abstract=False, patterns=None, **kwargs):
        Type.__init__(self, name, **kwargs)
        self.abstract = abstract
        self.patterns = patterns or (lambda typename: None)
        self.base_type = None
        self.members = []

    def add_member(self, variable):
        self.members.append(variable)

    def _fields(self):
        names = set()
        ret = []
        for m in self.members:
            name = validate_unique(validate_attribute(m.name), lambda n: n not in names)
            names.add(name)
            (type, is_array) = self.resolver(m.type)
            ret.append(Field(name, type, nullable=m.nullable,
                is_array=is_array or m.is_array, pattern=self.patterns(m.type), doc=m.name))
        return ret

    def required_params(self):
        '''
        Parameters for the fields that must be set when an instance is
        created, base type first.
        '''
        params = []
        if self.base_type is not None:
            params.extend(self.base_type.required_params())
        for (m, field) in zip(self.members, self._fields()):
            if not m.nullable:
                params.append(Parameter(field.name, field.type, is_array=field.is_array))
        return params

    def _build(self):
        extends = None
        base_params = []
        if self.base_type is not None:
            extends = self.base_type.identifier
            base_params = [p.name for p in self.base_type.required_params()]
        cls = ClassDecl(self.identifier, extends=extends, abstract=self.abstract,
                doc=self.doc, package=self.package)

        fields = self._fields()
        for field in fields:
            cls.add_field(field)

        cls.add_method(Method('__init__', self.required_params(), kind='constructor',
            base_params=base_params))

        for field in fields:
            cls.add_method(Method('get_%s' % field.name, returns=field.type,
                kind='getter', field=field.name, doc=field.doc))
            cls.add_method(Method('set_%s' % field.name,
                [Parameter(field.name, field.type, is_array=field.is_array)],
                returns=cls.identifier, kind='setter', field=field.name, doc=field.doc))
        return cls


class ArrayType(ComplexType):
    '''
    A complex type that only wraps a list of elements.  On top of what a
    complex type has, its class behaves like a sequence of the elements.
    '''
    def _build(self):
        cls = ComplexType._build(self)
        field = cls.fields[0]
        index = Parameter('index', 'int')
        value = Parameter('value', field.type)
        cls.add_method(Method('__getitem__', [index], returns=field.type, kind='item', field=field.name))
        cls.add_method(Method('__setitem__', [index, value], kind='setitem', field=field.name))
        cls.add_method(Method('__delitem__', [index], kind='delitem', field=field.name))
        cls.add_method(Method('__len__', returns='int', kind='len', field=field.name))
        cls.add_method(Method('__iter__', returns=field.type, kind='iter', field=field.name))
        return cls

    def element_type(self):
        return self.members[0].type

# VIM options (place at end of file)
# vim: ts=4 sts=4 sw=4 expandtab:
