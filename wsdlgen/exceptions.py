#####################################################
#
# exceptions.py
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
#    Exceptions raised while reading a WSDL and building its models
#
#####################################################


class WsdlGenError(Exception):
    pass

class LoadError(WsdlGenError):
    '''
    The WSDL, or a document it references, could not be fetched or parsed,
    or the operations could not be introspected from it.

    The original exception is kept in cause and, for HTTP failures, the
    response status code in status.
    '''
    def __init__(self, message, cause=None, status=None):
        WsdlGenError.__init__(self, message)
        self.message = message
        self.cause = cause
        self.status = status

    def __str__(self):
        if self.status is not None:
            return '%s (status %s)' % (self.message, self.status)
        return self.message

class ValidationError(WsdlGenError, ValueError):
    pass

class AlreadyBuiltError(WsdlGenError):
    pass

# VIM options (place at end of file)
# vim: ts=4 sts=4 sw=4 expandtab:
