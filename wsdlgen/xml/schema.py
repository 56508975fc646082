#####################################################
#
# schema.py
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
#    Load a WSDL or schema document and the documents it imports
#
#####################################################
from wsdlgen.xmlimpl import parse, location
from wsdlgen.xml.node import XmlNode
from wsdlgen.util import ns

from logging import getLogger
log=getLogger(__name__)

class SchemaDocument(XmlNode):
    '''
    A WSDL or XML Schema document together with every document it pulls
    in through wsdl:import, xs:import and xs:include.

    The document itself is the node wrapped by this object.  Queries made
    with xpath() run against every loaded document in the order they were
    loaded, so the root document always comes first.
    '''
    def __init__(self, url):
        self.url = location(url)
        self.documents = []
        self._loaded = set()
        doc = self._load(self.url)
        XmlNode.__init__(self, doc, doc.getroot())

    def _load(self, url):
        log.debug('Loading %s', url)
        self._loaded.add(url)
        doc = parse(url)
        self.documents.append(doc)
        root = doc.getroot()

        # Imported WSDL documents and the external schemas referenced by
        # every schema in this document (inline or not)
        refs = [el.get('location') for el in root.iterfind(ns.expand('wsdl:import'))]
        schemas = list(root.iter(ns.expand('xs:schema')))
        for s in schemas:
            for tag in ('xs:import', 'xs:include'):
                refs.extend(el.get('schemaLocation') for el in s.iterfind(ns.expand(tag)))

        for ref in refs:
            if not ref:
                continue
            ref = location(ref, url)
            if ref in self._loaded:
                continue
            log.debug('Following reference from %s to %s', url, ref)
            self._load(ref)
        return doc

    def xpath(self, query, *args):
        ret = []
        for doc in self.documents:
            ret.extend(XmlNode(doc, doc.getroot()).xpath(query, *args))
        return ret

# VIM options (place at end of file)
# vim: ts=4 sts=4 sw=4 expandtab:
