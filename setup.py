#!/usr/bin/env python
"""
Copyright 2025 Hathor Labs

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

   http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import os
import re

from setuptools import find_packages, setup


def get_version() -> str:
    # read without importing the package, which needs the dependencies installed
    with open(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'typedjson', 'version.py')) as fp:
        match = re.search(r"^__version__ = '([^']+)'$", fp.read(), re.MULTILINE)
    assert match is not None, 'version not found'
    return match.group(1)


install_requires = [
    'colorama',
    'configargparse',
    'pydantic>=2,<3',
    'PyYAML',
    'structlog',
    'typing_extensions',
]

setup(
    name='typedjson',
    version=get_version(),
    description='Schema-directed JSON codec for typed values, with ISO 8601 calendar types',
    author='Hathor Team',
    author_email='contact@hathor.network',
    url='https://hathor.network/',
    license='Apache-2.0',
    entry_points={
        'console_scripts': ['typedjson-cli=typedjson.cli.main:main'],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
    ],
    python_requires='>=3.11',
    packages=find_packages(exclude=('typedjson_tests', 'typedjson_tests.*')),
    install_requires=install_requires,
    extras_require={
        'test': ['pytest'],
    },
)
