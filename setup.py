# setup script for wsdlgen

from setuptools import setup
from wsdlgen import __version__

setup(
        name='wsdlgen',
        version=__version__,
        description='wsdlgen: build class models from WSDL service descriptions',
        author='Chris Frantz',
        author_email='chris.frantz@hp.com',
        packages=['wsdlgen', 'wsdlgen.model', 'wsdlgen.soap', 'wsdlgen.util',
            'wsdlgen.xml', 'wsdlgen.xsd'],
        install_requires=['lxml'],
        extras_require={'test': ['pytest']},
        license='LGPL_v2.1',
)



# vim: ts=4 sts=4 sw=4 expandtab:
