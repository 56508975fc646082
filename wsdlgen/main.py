#####################################################
#
# main.py
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
#    Command line front end.  Reads a WSDL and prints the classes that
#    would be generated for it.
#
#####################################################
from wsdlgen.config import Config
from wsdlgen.model.generator import Generator
from wsdlgen.exceptions import LoadError, ValidationError
import sys
import logging
from getopt import getopt, GetoptError

def usage(prog):
    print("""Usage: %s -i <wsdl> [options]

Read a WSDL and print the classes generated for its types and service.

    -i <wsdl>: The URL or path of the WSDL (required).
    -o <dir>: Output directory for the classes (default .).
    -n <namespace>: Namespace of the generated classes.
    -f <feature>: Enable a client option feature.  May be repeated.
    -c <cache>: WSDL cache of the client (WSDL_CACHE_NONE, WSDL_CACHE_DISK,
                WSDL_CACHE_MEMORY or WSDL_CACHE_BOTH).
    -z <compression>: Compression setting of the client.
    -1: Put all the classes in one file.
    -e: Guard the classes against being declared twice.
    -v: Verbose.
""" % prog)
    return 1

def main(argv):
    try:
        opts = getopt(argv[1:], 'i:o:n:f:c:z:1evh?')
    except GetoptError as ex:
        print(ex, file=sys.stderr)
        return usage(argv[0])

    kwargs = { 'option_features': [] }
    input_file = None
    for (opt, val) in opts[0]:
        if opt == '-i':
            input_file = val
        elif opt == '-o':
            kwargs['output_dir'] = val
        elif opt == '-n':
            kwargs['namespace_name'] = val
        elif opt == '-f':
            kwargs['option_features'].append(val)
        elif opt == '-c':
            kwargs['wsdl_cache'] = val
        elif opt == '-z':
            kwargs['compression'] = val
        elif opt == '-1':
            kwargs['one_file'] = True
        elif opt == '-e':
            kwargs['class_exists'] = True
        elif opt == '-v':
            logging.basicConfig(level=logging.DEBUG)
        elif opt in ('-h', '-?'):
            return usage(argv[0])

    if not input_file:
        return usage(argv[0])

    config = Config(input_file, **kwargs)
    try:
        generator = Generator(config).load()
    except (LoadError, ValidationError) as ex:
        print('%s: %s' % (argv[0], ex), file=sys.stderr)
        return 1

    for cls in generator.classes():
        print(cls)
        print()
    return 0

if __name__ == '__main__':
    sys.exit(main(sys.argv))

# vim: ts=4 sts=4 sw=4 expandtab:
