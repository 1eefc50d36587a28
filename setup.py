#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from setuptools import setup, find_packages
from codecs import open
from os import path

here = path.abspath(path.dirname(__file__))

# Get the long description from the README file
with open(path.join(here, 'README.rst'), encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='pdfappend',
    version=__import__('pdfappend').__version__,
    description='Incremental update of PDF documents: append streams, file attachments and replacement objects without rewriting the original bytes.',
    long_description=long_description,
    long_description_content_type='text/x-rst',
    url='https://github.com/qoorp/pdfappend',
    author='Qoorp',
    license='MIT',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Operating System :: OS Independent',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries :: Python Modules',
        'Topic :: Office/Business',
        'Topic :: Text Processing',
    ],
    keywords='pdf incremental update attachment embedded file xref',
    packages=find_packages(exclude=['examples', 'tests']),
    include_package_data=True,
    platforms=["all"],
    python_requires='>=3.10',
    install_requires=['pypdf>=3.9', 'attrs'],
    test_suite="tests",
)
