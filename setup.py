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

from setuptools import find_packages, setup

# XXX: the version is read without importing the package, its dependencies may not be installed yet
version: dict[str, str] = {}
with open('bincodec/version.py') as fp:
    exec(fp.read(), version)

install_requires = [
    'pydantic>=2.0',
    'pyyaml>=6.0',
    'structlog>=22.3',
    'typing_extensions>=4.6',
]

setup(
    name='bincodec',
    version=version['__version__'],
    description='Composable codecs for fixed binary layouts',
    author='Hathor Team',
    author_email='contact@hathor.network',
    url='https://hathor.network/',
    license='Apache-2.0',
    python_requires='>=3.10',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
    ],
    packages=find_packages(exclude=('tests', 'tests.*')),
    install_requires=install_requires,
    extras_require={
        'test': ['pytest>=7.0'],
    },
)
