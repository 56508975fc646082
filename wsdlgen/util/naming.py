#####################################################
#
# naming.py
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
#    Turn schema names into valid identifiers
#
#####################################################

import re
import keyword

_invalid = re.compile('[^A-Za-z0-9_]')

def _identifier(name, prefix):
    name = _invalid.sub('_', name)
    if not name or name[0].isdigit():
        name = prefix + name
    if keyword.iskeyword(name):
        name = prefix + name
    return name

def validate_constant(value):
    '''
    Turn an enumeration literal into a constant name.

    Characters that can't appear in an identifier become underscores and
    the name is upper cased.  Names that would start with a digit, be
    empty or collide with a keyword get a VALUE_ prefix.

        validate_constant('in progress') == 'IN_PROGRESS'
        validate_constant(3) == 'VALUE_3'
    '''
    return _identifier(str(value), 'VALUE_').upper()

def validate_class_name(name):
    '''Turn a schema type name into a class identifier'''
    name = _identifier(name, 'Type')
    return name[0].upper() + name[1:]

def validate_attribute(name):
    '''Turn an element or part name into a field/parameter identifier'''
    return _identifier(name, '_')

def validate_unique(name, unique):
    '''
    Make name unique.

    @type name: str
    @param name: The candidate name.
    @type unique: callable
    @param unique: Returns True if the name given to it is not taken.
    @rtype: str
    @return: name, or name with the lowest numeric suffix that is unique.
    '''
    if unique(name):
        return name
    i = 2
    while not unique('%s%d' % (name, i)):
        i += 1
    return '%s%d' % (name, i)

def ucfirst(s):
    return s[:1].upper() + s[1:]

# VIM options (place at end of file)
# vim: ts=4 sts=4 sw=4 expandtab:
