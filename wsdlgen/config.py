#####################################################
#
# config.py
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
#    Settings of a generation run
#
#####################################################

WSDL_CACHES = ('WSDL_CACHE_NONE', 'WSDL_CACHE_DISK', 'WSDL_CACHE_MEMORY', 'WSDL_CACHE_BOTH')

class Config(object):
    '''
    The settings of a generation run.

    None of them change how the schema is read.  They are passed on to
    the generated service class and to whatever writes the classes out.
    '''
    def __init__(self, input_file, output_dir='.', one_file=False, class_exists=False,
            namespace_name='', option_features=(), wsdl_cache='', compression=''):
        '''
        @type input_file: str
        @param input_file: URL or path of the WSDL.
        @type output_dir: str
        @param output_dir: Where the classes go.  Always ends with "/".
        @type one_file: bool
        @param one_file: Write every class to the same file.
        @type class_exists: bool
        @param class_exists: Guard every class against being declared twice.
        @type namespace_name: str
        @param namespace_name: Namespace (package) of the classes, none if empty.
        @type option_features: list of str
        @param option_features: Features to enable in the client options.
        @type wsdl_cache: str
        @param wsdl_cache: One of L{WSDL_CACHES}.  Anything else means no cache.
        @type compression: str
        @param compression: Compression setting for the client options.
        '''
        self.input_file = input_file
        if not output_dir.endswith('/'):
            output_dir += '/'
        self.output_dir = output_dir
        self.one_file = one_file
        self.class_exists = class_exists
        self.namespace_name = namespace_name
        self.option_features = list(option_features)
        self.wsdl_cache = ''
        if wsdl_cache in WSDL_CACHES:
            self.wsdl_cache = wsdl_cache
        self.compression = compression

    def client_options(self):
        '''The options the generated service class passes to its client'''
        options = {}
        if self.option_features:
            options['features'] = list(self.option_features)
        if self.wsdl_cache:
            options['cache_wsdl'] = self.wsdl_cache
        if self.compression:
            options['compression'] = self.compression
        return options

# VIM options (place at end of file)
# vim: ts=4 sts=4 sw=4 expandtab:
