# coding: utf-8
# Copyright 2023 The Emoji Tools Authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
import os
from setuptools import setup

def emojitools_scripts():
    return [os.path.join('bin', f) for f in os.listdir('bin') if f.startswith('emojitools')]

# Read the contents of the README file
with open('README.md') as f:
    long_description = f.read()

setup(
    name="emojitools",
    version="0.1.0",
    description='Release automation for the emoji repository: release notes'
                ' and PNG generation',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='Emoji Tools Authors',
    package_dir={'': 'Lib'},
    packages=['emojitools',
              'emojitools.actions',
              'emojitools.scripts'],
    scripts=emojitools_scripts(),
    zip_safe=False,
    classifiers=[
        'Environment :: Console',
        'Intended Audience :: Developers',
        'Topic :: Multimedia :: Graphics :: Graphics Conversion',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3'
    ],
    python_requires=">=3.8",
    extras_require={"test": ['pytest']},
    install_requires=[
        'setuptools',
        'requests',
        'rich',
        'cairosvg',
    ]
    )
