# Copyright 2016 Amazon.com, Inc. or its affiliates. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License").
# You may not use this file except in compliance with the License.
# A copy of the License is located at:
#
#    http://aws.amazon.com/apache2.0/
#
# or in the "license" file accompanying this file. This file is
# distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS
# OF ANY KIND, either express or implied. See the License for the
# specific language governing permissions and limitations under the
# License.

from setuptools import setup, find_packages


def run_setup():
    setup(
        name='memview',
        version='0.1.0',
        description='Contiguous read-only views over discrete segments of memory.',
        author='Amazon.com, Inc.',
        license='Apache License 2.0',
        python_requires='>=3.8',

        packages=find_packages(exclude=['tests*']),
        include_package_data=True,

        install_requires=[
            'jsonconversion',
        ],

        extras_require={
            'test': ['pytest'],
        },

        tests_require=[
            'pytest',
        ],
    )


run_setup()
