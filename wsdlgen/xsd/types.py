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
#     Type converters for the basic types in the XS namespace.
#     Each converter knows which python type a field of that xs:type is
#     declared as.  The string and integer converters can also check
#     enumeration values.
#
#####################################################

class xs_type:
    pytype = 'object'
    @classmethod
    def check(cls, value):
        return value is not None

class xs_string(xs_type):
    pytype = 'str'
    @classmethod
    def check(cls, value):
        return isinstance(value, str)

class xs_boolean(xs_type):
    pytype = 'bool'

class xs_integer(xs_type):
    pytype = 'int'
    @classmethod
    def check(cls, value):
        return isinstance(value, int) and not isinstance(value, bool)

    @classmethod
    def fromstr(cls, value):
        return int(value)

class xs_float(xs_type):
    pytype = 'float'

class xs_dateTime(xs_type):
    pytype = 'datetime'

class xs_date(xs_type):
    pytype = 'date'

class xs_time(xs_type):
    pytype = 'time'

class xs_binary(xs_type):
    pytype = 'bytes'


converters = {
        'xs:string': xs_string,
        'xs:normalizedString': xs_string,
        'xs:token': xs_string,
        'xs:anyURI': xs_string,
        'xs:QName': xs_string,
        'xs:boolean': xs_boolean,
        'xs:integer': xs_integer,
        'xs:nonNegativeInteger': xs_integer,
        'xs:positiveInteger': xs_integer,
        'xs:byte': xs_integer,
        'xs:short': xs_integer,
        'xs:int': xs_integer,
        'xs:long': xs_integer,
        'xs:unsignedByte': xs_integer,
        'xs:unsignedShort': xs_integer,
        'xs:unsignedInt': xs_integer,
        'xs:unsignedLong': xs_integer,
        'xs:decimal': xs_float,
        'xs:float': xs_float,
        'xs:double': xs_float,
        'xs:dateTime': xs_dateTime,
        'xs:date': xs_date,
        'xs:time': xs_time,
        'xs:base64Binary': xs_binary,
        'xs:hexBinary': xs_binary,
        'xs:anyType': xs_type,
}

def isprimitive(typestr):
    return typestr in converters

def converter(typestr):
    '''
    Get a converter for the requested xs:type.

    @type typestr: str
    @param typestr: Name of an xs:type like xs:string or xs:int.
    @rtype: subclass of xs_type
    @return: The converter, xs_type for unknown types.
    '''
    try:
        return converters[typestr]
    except KeyError:
        return xs_type

# VIM options (place at end of file)
# vim: ts=4 sts=4 sw=4 expandtab:
