#####################################################
#
# wsdl.py
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
#    WSDL document introspection
#
#####################################################
from urllib.error import HTTPError, URLError

from wsdlgen.xmlimpl import ET
from wsdlgen.xml.schema import SchemaDocument
from wsdlgen.xml.typenode import TypeNode, anonymous_type_name
from wsdlgen.xml.operation import OperationNode, ServiceNode
from wsdlgen.soap.client import Client
from wsdlgen.exceptions import LoadError
from wsdlgen.util import ns

from logging import getLogger
log=getLogger(__name__)

class WsdlDocument(SchemaDocument):
    '''
    The WSDL document of a SOAP service.

    This is where everything about the service is read from: the data
    types used to call it, the service itself and the operations it
    exposes.
    '''
    def __init__(self, url, client=None):
        '''
        @type url: str
        @param url: URL or path of the WSDL.
        @param client: Optional.  Reports the operation signatures of the
            service.  Anything with a list_operation_signatures() method
            will do.  By default a L{Client} is built for the document.
        @raise LoadError: The WSDL or a document it references can't be
            fetched or parsed, or the operations can't be read from it.
        '''
        try:
            SchemaDocument.__init__(self, url)
            if client is None:
                client = Client(self)
        except HTTPError as ex:
            log.error('Unable to load WSDL %s: %s', url, ex)
            raise LoadError('Unable to load WSDL %s: %s' % (url, ex.reason), ex, ex.code) from ex
        except (URLError, OSError, ET.XMLSyntaxError) as ex:
            log.error('Unable to load WSDL %s: %s', url, ex)
            raise LoadError('Unable to load WSDL %s: %s' % (url, ex), ex) from ex
        except (KeyError, ValueError, ns.UnknownNamespace) as ex:
            log.error('Unable to read the operations of %s: %s', url, ex)
            raise LoadError('Unable to read the operations of %s: %s' % (url, ex), ex) from ex
        self.client = client
        self.namespace = self._init_namespace()

    def _init_namespace(self):
        definitions = self.xpath('//wsdl:definitions')
        if not definitions:
            return None
        return definitions[0].attributes.raw('targetNamespace')

    def get_types(self):
        '''
        Every type defined by the schemas of the service.

        Named simpleTypes and complexTypes come first, then the anonymous
        complexTypes declared inside elements.  Both are in document
        order.

        @rtype: list of L{TypeNode}
        '''
        types = []
        for node in self.xpath('//s:simpleType[@name]|//s:complexType[@name]'):
            types.append(TypeNode(node, node.attributes.raw('name'), self.namespace))

        for node in self.xpath('//s:element/s:complexType[not(@name)]'):
            name = anonymous_type_name(node.element.getparent())
            types.append(TypeNode(node, name, self.namespace, anonymous=True))

        return types

    def get_service(self):
        '''The first wsdl:service of the document, or None'''
        services = self.xpath('//wsdl:service')
        if services:
            return ServiceNode(services[0])
        return None

    def get_operations(self):
        '''
        The operations exposed by the service.

        Only operations the client reports that also have a wsdl:operation
        node with the same name are returned.

        @rtype: list of L{OperationNode}
        '''
        nodes = {}
        for node in self.xpath('//wsdl:operation[@name]'):
            nodes.setdefault(node.attributes.raw('name'), node)

        operations = []
        seen = set()
        for signature in self.client.list_operation_signatures():
            try:
                operation = OperationNode(signature)
            except ValueError:
                log.debug("Can't parse signature %r, dropping it", signature)
                continue
            if operation.name in seen:
                continue
            node = nodes.get(operation.name)
            if node is None:
                log.debug('No wsdl:operation for %s, dropping it', signature)
                continue
            operation.set_node(node)
            operations.append(operation)
            seen.add(operation.name)
        return operations

# VIM options (place at end of file)
# vim: ts=4 sts=4 sw=4 expandtab:
