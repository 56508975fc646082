#####################################################
#
# code.py
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
#    Language neutral declarations of the classes to generate.  The
#    generator fills these in; an emitter turns them into source text.
#
#####################################################

class Reference(object):
    '''A reference to a constant of the class being declared'''
    def __init__(self, name):
        self.name = name
    def __eq__(self, other):
        return isinstance(other, Reference) and other.name == self.name
    def __hash__(self):
        return hash(self.name)
    def __repr__(self):
        return 'Reference(%r)' % self.name

class Constant(object):
    def __init__(self, name, value, doc=''):
        self.name = name
        self.value = value
        self.doc = doc
    def __repr__(self):
        return '<Constant %s=%r>' % (self.name, self.value)

class Field(object):
    '''
    A field of a class.

    type is the resolved type name.  When is_array is set, the field
    holds a list of values of that type.  pattern is the regular
    expression values must match, if the schema gives one.
    '''
    def __init__(self, name, type, default=None, nullable=False, is_array=False,
            access='protected', pattern=None, doc=''):
        self.name = name
        self.type = type
        self.pattern = pattern
        self.default = default
        self.nullable = nullable
        self.is_array = is_array
        self.access = access
        self.doc = doc
    def __repr__(self):
        return '<Field %s: %s%s>' % (self.name, self.type, '[]' if self.is_array else '')

class Parameter(object):
    def __init__(self, name, type=None, default=None, optional=False, is_array=False):
        self.name = name
        self.type = type
        self.default = default
        self.optional = optional
        self.is_array = is_array
    def __repr__(self):
        return '<Parameter %s: %s>' % (self.name, self.type)

class Method(object):
    '''
    A method of a class.

    The body is not part of the declaration; kind says what the method
    does so an emitter can write it:

        constructor -- assign each parameter to the field of that name,
                       calling the base constructor with base_params first
        getter      -- return field
        setter      -- assign the single parameter to field
        value       -- return the enumeration value
        item/setitem/delitem/len/iter
                    -- sequence protocol on field
        operation   -- call the SOAP operation named operation
    '''
    def __init__(self, name, params=(), returns=None, kind='method', field=None,
            doc='', **extra):
        self.name = name
        self.params = list(params)
        self.returns = returns
        self.kind = kind
        self.field = field
        self.doc = doc
        self.extra = extra
    def __repr__(self):
        return '<Method %s(%s)>' % (self.name, ', '.join(p.name for p in self.params))

class ClassDecl(object):
    '''
    The declaration of a class: its constants, fields and methods.

    Members can only be added.  Adding a second member of the same kind
    with the same name raises ValueError.
    '''
    def __init__(self, identifier, extends=None, abstract=False, doc='', package=''):
        self.identifier = identifier
        self.package = package
        self.extends = extends
        self.abstract = abstract
        self.doc = doc
        self.constants = []
        self.fields = []
        self.methods = []

    @staticmethod
    def _add(members, member, what):
        for m in members:
            if m.name == member.name:
                raise ValueError('Duplicate %s' % what, member.name)
        members.append(member)
        return member

    def add_constant(self, constant):
        return self._add(self.constants, constant, 'constant')

    def add_field(self, field):
        return self._add(self.fields, field, 'field')

    def add_method(self, method):
        return self._add(self.methods, method, 'method')

    def constant(self, name):
        for c in self.constants:
            if c.name == name:
                return c
        return None

    def field(self, name):
        for f in self.fields:
            if f.name == name:
                return f
        return None

    def method(self, name):
        for m in self.methods:
            if m.name == name:
                return m
        return None

    def __str__(self):
        a = []
        head = 'class %s' % self.identifier
        if self.extends:
            head += '(%s)' % self.extends
        if self.abstract:
            head = 'abstract ' + head
        a.append(head + ':')
        for c in self.constants:
            a.append('    %s = %r' % (c.name, c.value))
        for f in self.fields:
            a.append('    %s: %s%s' % (f.name, f.type, '[]' if f.is_array else ''))
        for m in self.methods:
            params = ', '.join('%s: %s' % (p.name, p.type) for p in m.params)
            a.append('    def %s(%s) -> %s' % (m.name, params, m.returns))
        return '\n'.join(a)

# VIM options (place at end of file)
# vim: ts=4 sts=4 sw=4 expandtab:
