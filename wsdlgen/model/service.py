#####################################################
#
# service.py
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
#    Model of the service and its operations
#
#####################################################
from wsdlgen.model.types import Type, unresolved
from wsdlgen.code import ClassDecl, Field, Method, Parameter
from wsdlgen.util.naming import validate_attribute, validate_unique

class Operation(object):
    '''An operation of the service, ready to become a method'''
    def __init__(self, name, params, returns, doc='', resolver=None):
        '''
        @type params: dict
        @param params: Parameter names mapped to schema type names.
        '''
        self.name = name
        self.params = params
        self.returns = returns
        self.doc = doc
        self.resolver = resolver or unresolved

    def method(self, name):
        params = []
        names = set()
        for (pname, ptype) in self.params.items():
            pname = validate_unique(validate_attribute(pname), lambda n: n not in names)
            names.add(pname)
            (type, is_array) = self.resolver(ptype)
            params.append(Parameter(pname, type, is_array=is_array))
        (returns, _) = self.resolver(self.returns)
        if self.returns == 'void':
            returns = None
        return Method(name, params, returns=returns, kind='operation',
                doc=self.doc, operation=self.name)

    def __repr__(self):
        return '<Operation %s>' % self.name


class Service(Type):
    '''
    The service itself.  Its class is the client: it knows which class
    goes with which schema type and has a method per operation.
    '''
    def __init__(self, name, config, types=(), **kwargs):
        Type.__init__(self, name or 'Service', **kwargs)
        self.config = config
        self.types = list(types)
        self.operations = []

    def add_operation(self, operation):
        self.operations.append(operation)

    def _build(self):
        cls = ClassDecl(self.identifier, doc=self.doc, package=self.package)
        classmap = dict((t.name, t.identifier) for t in self.types if t.produces_class())
        cls.add_field(Field('classmap', 'dict', default=classmap, access='private'))
        cls.add_field(Field('options', 'dict', default=self.config.client_options(),
            access='private'))
        cls.add_method(Method('__init__', [
            Parameter('wsdl', 'str', default=self.config.input_file, optional=True),
            Parameter('options', 'dict', default={}, optional=True),
            ], kind='constructor'))

        names = set(m.name for m in cls.methods)
        for operation in self.operations:
            name = validate_unique(validate_attribute(operation.name), lambda n: n not in names)
            names.add(name)
            cls.add_method(operation.method(name))
        return cls

# VIM options (place at end of file)
# vim: ts=4 sts=4 sw=4 expandtab:
