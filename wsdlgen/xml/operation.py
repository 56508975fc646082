#####################################################
#
# operation.py
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
#    Operations and service of a WSDL document
#
#####################################################
import re

_signature = re.compile(r'^\s*(\S+)\s+([A-Za-z_][\w.-]*)\s*\((.*)\)\s*$')

class OperationNode(object):
    '''
    An operation exposed by the service.

    The operation is described by two sources: the signature reported by
    the SOAP client and the wsdl:operation node with the same name.  Only
    operations where both are known make it into the model.
    '''
    def __init__(self, signature):
        '''
        @type signature: str
        @param signature: "ReturnType name(ParamType param, ...)"
        '''
        self.signature = signature
        (self.returns, self.name, self.params) = self.parse(signature)
        self.node = None

    @staticmethod
    def parse(signature):
        '''
        Split a signature into its return type, name and parameters.

        @rtype: tuple
        @return: (return type, name, dict of parameter name to type)
        '''
        match = _signature.match(signature)
        if not match:
            raise ValueError('Malformed operation signature', signature)
        (returns, name, arglist) = match.groups()
        params = {}
        for arg in arglist.split(','):
            arg = arg.split()
            if len(arg) == 2:
                params[arg[1].lstrip('$')] = arg[0]
            elif len(arg) == 1:
                params[arg[0]] = arg[0]
        return (returns, name, params)

    def set_node(self, node):
        self.node = node

    def get_documentation(self):
        if self.node is None:
            return ''
        return self.node.get_documentation()

    def __repr__(self):
        return '<OperationNode %s>' % self.signature


class ServiceNode(object):
    '''The wsdl:service element of the document'''
    def __init__(self, node):
        self.node = node
        self.name = node.get('name')

    def get_documentation(self):
        return self.node.get_documentation()

    def __repr__(self):
        return '<ServiceNode %s>' % self.name

# VIM options (place at end of file)
# vim: ts=4 sts=4 sw=4 expandtab:
