#!/usr/bin/python3

# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2026 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

#
# A setup.py file
#

from setuptools import setup, find_packages
from os import path

here = path.abspath(path.dirname(__file__))

version = "1.0.0"

with open(path.join(here, 'README.md'), 'r') as f:
    long_description = f.read()

setup(
    name='dsaccesslog',
    license='GPLv3+',
    version=version,
    description='A library for decoding JSON formatted Directory Server ' +
                'access logs',
    long_description=long_description,
    long_description_content_type='text/markdown',

    author='Red Hat Inc.',
    author_email='389-devel@lists.fedoraproject.org',

    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Intended Audience :: System Administrators',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Software Development :: Libraries',
        'Topic :: System :: Logging'],

    keywords='389 directory server ldap access log json',
    packages=find_packages(exclude=['tests*', '*.tests']),
    python_requires='>=3.10',

    install_requires=[
        'python-dateutil',
        'cryptography',
        'setuptools',
        ],

    extras_require={
        'test': ['pytest'],
        },
)
