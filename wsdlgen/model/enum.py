#####################################################
#
# enum.py
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
#    Model of enumerated simple types
#
#####################################################
from wsdlgen.model.types import Type
from wsdlgen.code import ClassDecl, Constant, Field, Method, Parameter, Reference
from wsdlgen.exceptions import ValidationError
from wsdlgen.xsd.types import converter
from wsdlgen.util.naming import validate_constant, validate_unique

DEFAULT = '__default__'

class Enum(Type):
    '''
    A simple type restricted to a list of values.

    Each value becomes a constant of the class.  The constant names are
    made from the values, so the same values in the same order always
    give the same names.  The first value is also the default, through
    the __default__ constant.
    '''
    def __init__(self, name, datatype, **kwargs):
        Type.__init__(self, name, datatype, **kwargs)
        self.values = []
        self.members = None

    def add_value(self, value):
        '''
        Add a value, checking it against the datatype of the enumeration.

        string values must be strings.  integer values may be given as
        strings, they are converted.  For any other datatype the value
        only has to be something.

        @raise ValidationError: The value doesn't fit the datatype.
        '''
        if self.datatype == 'string':
            if not converter('xs:string').check(value):
                raise ValidationError('The value(%r) is not string but the restriction demands it' % (value,))
        elif self.datatype == 'integer':
            # Values come from the WSDL as strings
            c = converter('xs:integer')
            if isinstance(value, str):
                try:
                    value = c.fromstr(value.strip())
                except ValueError:
                    raise ValidationError('The value(%r) is not int but the restriction demands it' % (value,))
            if not c.check(value):
                raise ValidationError('The value(%r) is not int but the restriction demands it' % (value,))
        elif not converter('xs:anyType').check(value):
            raise ValidationError('Value is null', self.name)

        self.values.append(value)

    def get_valid_values(self):
        return ', '.join(str(v) for v in self.values)

    def build_model(self):
        '''
        Name the values.

        @rtype: list
        @return: (value, constant name) pairs in the order the values
            were added.
        '''
        names = []
        members = []
        for value in self.values:
            name = validate_unique(validate_constant(value), lambda n: n not in names)
            names.append(name)
            members.append((value, name))
        return members

    def default(self):
        '''Name of the constant that is the default value, or None'''
        if not self.values:
            return None
        return self.get_class().constant(DEFAULT).value.name

    def _build(self):
        self.members = self.build_model()
        doc = self.doc
        if self.values:
            doc = ('%s\n\nValid values: %s' % (doc, self.get_valid_values())).strip()
        cls = ClassDecl(self.identifier, doc=doc, package=self.package)

        for (i, (value, name)) in enumerate(self.members):
            if i == 0:
                cls.add_constant(Constant(DEFAULT, Reference(name)))
            cls.add_constant(Constant(name, value))

        datatype = 'int' if self.datatype == 'integer' else 'str'
        default = Reference(DEFAULT) if self.members else None
        cls.add_field(Field('value', datatype, access='private'))
        cls.add_method(Method('__init__',
            [Parameter('value', datatype, default=default, optional=default is not None)],
            kind='constructor'))
        cls.add_method(Method('get_value', returns=datatype, kind='getter', field='value'))
        cls.add_method(Method('__str__', returns='str', kind='value', field='value'))
        return cls

# VIM options (place at end of file)
# vim: ts=4 sts=4 sw=4 expandtab:
