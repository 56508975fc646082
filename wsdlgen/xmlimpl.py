#####################################################
#
# xmlimpl.py
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
#    Parse XML documents from URLs or files with lxml
#
#####################################################

import os
import lxml.etree as ET
from urllib.request import urlopen
from urllib.parse import urljoin, urlparse

URL_SCHEMES = ('http', 'https', 'ftp', 'file')

class xmlstr:
    '''
    A class that defers ET.tostring until the instance is
    evaluated in string context.

    Use this to print xml etrees in debug statements:

        xml = ET.parse(...)
        log.debug("The xml was: %s", xmlstr(xml))
    '''
    def __init__(self, xml):
        self.xml = xml
    def __str__(self):
        return ET.tostring(self.xml, pretty_print=True, encoding='unicode')

def location(href, base=None):
    '''
    Compute the location of a document referenced from base.

    Relative references are joined onto the base URL, or onto the
    directory of the base path when base is a plain filename.  Paths
    come back normalized, so one file always has the same location.
    '''
    if urlparse(href).scheme in URL_SCHEMES:
        return href
    if not base:
        return os.path.normpath(href)
    if urlparse(base).scheme in URL_SCHEMES:
        return urljoin(base, href)
    return os.path.normpath(os.path.join(os.path.dirname(base), href))

def parse(source):
    '''
    Parse an XML document from a URL or a filename.

    @type source: str
    @param source: The URL or path of the document.
    @rtype: L{ET._ElementTree}
    @return: The parsed document.
    '''
    if urlparse(source).scheme in URL_SCHEMES:
        with urlopen(source) as rsp:
            return ET.parse(rsp, base_url=source)
    return ET.parse(source)

__all__ = [ 'ET', 'xmlstr', 'location', 'parse' ]

# VIM options (place at end of file)
# vim: ts=4 sts=4 sw=4 expandtab:
