#####################################################
#
# client.py
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
#    Read the bindings of a WSDL and list the operation signatures
#
#####################################################
from wsdlgen.xmlimpl import xmlstr
from wsdlgen.xml.schema import SchemaDocument
from wsdlgen.util import ns
from copy import copy
from logging import getLogger

log = getLogger(__name__)

class WSDL(object):
    '''
    WSDL holds the documents of a service description and the
    messages they define.
    '''
    def __init__(self, schema, nsmap=None):
        '''
        @type schema: L{SchemaDocument} or str
        @param schema: A loaded document, or the URL/path to load.
        '''
        if not isinstance(schema, SchemaDocument):
            schema = SchemaDocument(schema)
        self.url = schema.url
        self.nsmap = nsmap or ns._defns
        self.documents = schema.documents
        self.messages = self._messages()

    def find(self, path):
        ret = None
        for doc in self.documents:
            ret = doc.getroot().find(path, namespaces=self.nsmap)
            if ret is not None:
                break
        return ret

    def findall(self, path):
        ret = []
        for doc in self.documents:
            ret.extend(doc.getroot().findall(path, namespaces=self.nsmap))
        return ret

    def _messages(self):
        '''
        Map each wsdl:message name to its list of (part name, type) pairs.
        The type of a part is its element or type, without namespace.
        '''
        messages = {}
        for m in self.findall('wsdl:message'):
            parts = []
            for part in m.findall('wsdl:part', namespaces=self.nsmap):
                type = part.get('element') or part.get('type')
                parts.append((part.get('name'), ns.strip(type)))
            messages[m.get('name')] = parts
        return messages


class Operation(object):
    '''
    The Operation class represents a wsdl:operation of a binding.
    '''
    def __init__(self, client, btype, op):
        self.name = op.get('name')
        portop = client.wsdl.find('wsdl:portType[@name="%s"]/wsdl:operation[@name="%s"]' % (btype, self.name))
        if portop is None:
            raise KeyError('No portType operation for binding operation', btype, self.name)
        self.imsg = []
        self.omsg = []
        for el in portop:
            if not isinstance(el.tag, str):
                continue
            (namespace, tag) = ns.split(el.tag)
            if tag == 'input':
                self.imsg = client.wsdl.messages[ns.strip(el.get('message'))]
            elif tag == 'output':
                self.omsg = client.wsdl.messages[ns.strip(el.get('message'))]

    def returns(self):
        if self.omsg:
            return self.omsg[0][1]
        return 'void'

    def __str__(self):
        param = ['%s %s' % (type, name) for (name, type) in self.imsg]
        return '%s %s(%s)' % (self.returns(), self.name, ', '.join(param))

class Service(object):
    def __init__(self, name):
        self.name = name
        self.operations = {}

class Client(object):
    '''
    Client reads the bindings of a WSDL and reports the operations a SOAP
    client for it could call.  It never sends a request.
    '''
    def __init__(self, wsdl, nsmap={}):
        self.nsmap = copy(ns._defns)
        self.nsmap.update(nsmap)
        if isinstance(wsdl, WSDL):
            self.wsdl = wsdl
        else:
            self.wsdl = WSDL(wsdl, nsmap=self.nsmap)
        self.services = {}
        self._mk_service()

    def _mk_service(self):
        '''
        Build a Service object for each wsdl:service
        '''
        for s in self.wsdl.findall('wsdl:service'):
            name = s.get('name')
            service = Service(name)
            self.services[name] = service
            for port in s.findall('wsdl:port', namespaces=self.nsmap):
                self._mk_binding(ns.strip(port.get('binding')), service)

    def _mk_binding(self, bname, service):
        '''
        Build operation objects bound to the service
        '''
        binding = self.wsdl.find('wsdl:binding[@name="%s"]' % bname)
        if binding is None:
            raise KeyError('Unknown binding', bname)
        log.debug("Binding %s:\n%s", bname, xmlstr(binding))
        btype = ns.strip(binding.get('type'))
        for op in binding.findall('wsdl:operation', namespaces=self.nsmap):
            operation = Operation(self, btype, op)
            log.debug('Binding %s: %s', bname, operation)
            service.operations.setdefault(operation.name, operation)

    def list_operation_signatures(self):
        '''
        Signatures of all the operations of all the services, in document
        order, each one once.

        @rtype: list of str
        @return: Strings like "GetUserResponse GetUser(GetUser parameters)"
        '''
        ret = []
        for service in self.services.values():
            for operation in service.operations.values():
                sig = str(operation)
                if sig not in ret:
                    ret.append(sig)
        return ret


# VIM options (place at end of file)
# vim: ts=4 sts=4 sw=4 expandtab:
